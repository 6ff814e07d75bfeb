"""
Custom column types.
"""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator


class ExactDecimal(TypeDecorator):
    """
    Decimal column that round-trips exactly on every backend.

    Uses NUMERIC where the database has a real decimal type. SQLite would
    store NUMERIC as a float, so there the value is kept as text.
    """
    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int = 38, scale: int = 2):
        super().__init__(precision=precision, scale=scale)
        self.precision = precision
        self.scale = scale

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(self.precision + 2))
        return dialect.type_descriptor(Numeric(precision=self.precision, scale=self.scale))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if dialect.name == "sqlite":
            return str(Decimal(value))
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value) if not isinstance(value, Decimal) else value
