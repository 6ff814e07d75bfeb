"""
Database connection and session management.
Uses SQLAlchemy for ORM and connection pooling.
"""

from typing import Any, Dict

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from accounts_service.core.config import settings


def _serialize_sqlite_writers(engine) -> None:
    """
    SQLite ignores SELECT ... FOR UPDATE. Start every transaction with
    BEGIN IMMEDIATE instead so read-modify-write sequences do not interleave.
    """

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_engine_for_url(database_url: str, echo: bool = False, **engine_args):
    """
    Build an engine for the given URL.
    SQLite gets a thread-tolerant connection, everything else a sized pool.
    """
    if database_url.startswith("sqlite"):
        sqlite_engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            **engine_args
        )
        _serialize_sqlite_writers(sqlite_engine)
        return sqlite_engine

    pool_args: Dict[str, Any] = {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": 10,  # Connection pool size
        "max_overflow": 20,  # Max connections beyond pool_size
    }
    pool_args.update(engine_args)
    return create_engine(database_url, echo=echo, **pool_args)


engine = create_engine_for_url(settings.DATABASE_URL, echo=settings.DB_ECHO)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Yields session and ensures it's closed after use.

    Usage:
        @app.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db here
            pass
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
