"""
Account database model.
Represents bank accounts in the system.
"""

from sqlalchemy import Column, String, DateTime, Integer, Enum as SQLEnum
from datetime import datetime
from accounts_service.database import Base
from accounts_service.models.types import ExactDecimal
import enum


class AccountType(str, enum.Enum):
    """Account types. The type decides the withdrawal policy."""
    SAVINGS = "SAVINGS"
    CHECKING = "CHECKING"


class Account(Base):
    """
    Account table - stores bank account information.
    """
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    account_number = Column(String(64), unique=True, index=True, nullable=False)
    balance = Column(ExactDecimal(precision=38, scale=2), nullable=False, default=0)
    account_type = Column(SQLEnum(AccountType), nullable=False)
    customer_id = Column(Integer, index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def snapshot(self) -> "Account":
        """
        Detached copy of the current column values.
        """
        return Account(
            id=self.id,
            account_number=self.account_number,
            balance=self.balance,
            account_type=self.account_type,
            customer_id=self.customer_id,
            created_at=self.created_at,
        )

    def __repr__(self):
        return (
            f"<Account(id={self.id}, number={self.account_number}, "
            f"type={self.account_type}, balance={self.balance})>"
        )
