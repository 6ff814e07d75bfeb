"""
Pydantic schemas package.
"""

from accounts_service.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountBalance,
    AmountRequest,
    BalanceUpdate,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AccountBalance",
    "AmountRequest",
    "BalanceUpdate",
]
