"""
Pydantic schemas for Account API requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
from datetime import datetime
from typing import Optional
from accounts_service.models.account import AccountType


class AccountCreate(BaseModel):
    """Schema for creating a new account."""
    account_type: AccountType = Field(..., description="SAVINGS or CHECKING")
    customer_id: int = Field(..., description="Owning customer, checked against the customer registry")
    balance: Decimal = Field(default=Decimal("0.00"), ge=0, decimal_places=2, description="Initial account balance")
    account_number: Optional[str] = Field(None, min_length=1, max_length=64, description="Generated when omitted")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "account_type": "CHECKING",
                "customer_id": 1,
                "balance": 1000.00
            }
        }
    )


class AccountResponse(BaseModel):
    """Schema for account response."""
    id: int
    account_number: str
    balance: Decimal
    account_type: AccountType
    customer_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AccountBalance(BaseModel):
    """Schema for account balance response."""
    id: int
    account_number: str
    balance: Decimal

    model_config = ConfigDict(from_attributes=True)


class AmountRequest(BaseModel):
    """
    Schema for deposits and withdrawals.
    The sign of the amount is checked by the transaction engine.
    """
    amount: Decimal = Field(..., decimal_places=2, description="Amount to move, must be positive")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": 250.00
            }
        }
    )


class BalanceUpdate(BaseModel):
    """Schema for the administrative balance override."""
    balance: Decimal = Field(..., decimal_places=2, description="New balance, no withdrawal policy applied")
