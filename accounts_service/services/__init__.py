"""
Account services package.
"""

from accounts_service.services.customer_validator import CustomerValidator
from accounts_service.services.lifecycle import AccountDraft, AccountLifecycle
from accounts_service.services.queries import QueryFacade
from accounts_service.services.results import ErrorKind, Failure, Result, Success
from accounts_service.services.store import (
    AccountStore,
    DuplicateAccountError,
    SqlAccountStore,
    StoreError,
)
from accounts_service.services.transactions import OVERDRAFT_FLOOR, TransactionEngine

__all__ = [
    "AccountDraft",
    "AccountLifecycle",
    "AccountStore",
    "CustomerValidator",
    "DuplicateAccountError",
    "ErrorKind",
    "Failure",
    "OVERDRAFT_FLOOR",
    "QueryFacade",
    "Result",
    "SqlAccountStore",
    "StoreError",
    "Success",
    "TransactionEngine",
]
