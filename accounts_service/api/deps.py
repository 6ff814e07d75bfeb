"""
FastAPI dependencies wiring the services to a request-scoped session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from accounts_service.core.config import settings
from accounts_service.database import get_db
from accounts_service.services.customer_validator import CustomerValidator
from accounts_service.services.lifecycle import AccountLifecycle
from accounts_service.services.queries import QueryFacade
from accounts_service.services.store import AccountStore, SqlAccountStore
from accounts_service.services.transactions import TransactionEngine


def get_store(db: Session = Depends(get_db)) -> AccountStore:
    return SqlAccountStore(db)


def get_customer_validator():
    """
    Registry client for one request, closed when the request ends.
    """
    validator = CustomerValidator.from_settings(settings)
    try:
        yield validator
    finally:
        validator.close()


def get_lifecycle(
    store: AccountStore = Depends(get_store),
    validator: CustomerValidator = Depends(get_customer_validator),
) -> AccountLifecycle:
    return AccountLifecycle(store, validator)


def get_transaction_engine(store: AccountStore = Depends(get_store)) -> TransactionEngine:
    return TransactionEngine(store)


def get_queries(store: AccountStore = Depends(get_store)) -> QueryFacade:
    return QueryFacade(store)
