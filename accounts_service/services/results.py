"""
Result types returned by the account services.

Business rule violations are returned as Failure values instead of being
raised, so callers branch on the kind explicitly.
"""

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    """Failure kinds surfaced by the account services."""
    INVALID_AMOUNT = "invalid_amount"
    ACCOUNT_NOT_FOUND = "account_not_found"
    CUSTOMER_NOT_FOUND = "customer_not_found"
    INSUFFICIENT_SAVINGS_BALANCE = "insufficient_savings_balance"
    OVERDRAFT_LIMIT_EXCEEDED = "overdraft_limit_exceeded"
    DELETION_FAILED = "deletion_failed"
    DUPLICATE_ACCOUNT_NUMBER = "duplicate_account_number"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    account_id: Optional[int] = None
    customer_id: Optional[int] = None
    # Diagnostic cause, never used for branching
    detail: Optional[str] = None


Result = Union[Success[T], Failure]


def invalid_amount(operation: str) -> Failure:
    return Failure(ErrorKind.INVALID_AMOUNT, f"{operation} amount must be greater than zero")


def account_not_found(account_id: int) -> Failure:
    return Failure(
        ErrorKind.ACCOUNT_NOT_FOUND,
        f"Account {account_id} not found",
        account_id=account_id,
    )


def customer_not_found(customer_id: int, detail: Optional[str] = None) -> Failure:
    return Failure(
        ErrorKind.CUSTOMER_NOT_FOUND,
        f"Customer {customer_id} not found",
        customer_id=customer_id,
        detail=detail,
    )
