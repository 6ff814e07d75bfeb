"""
Account creation and deletion.
"""

import logging
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from accounts_service.models.account import Account, AccountType
from accounts_service.services.customer_validator import CustomerValidator
from accounts_service.services.results import (
    ErrorKind,
    Failure,
    Result,
    Success,
    account_not_found,
)
from accounts_service.services.store import AccountStore, DuplicateAccountError

logger = logging.getLogger(__name__)


@dataclass
class AccountDraft:
    """Input describing an account that has not been persisted yet."""
    account_type: AccountType
    customer_id: int
    balance: Decimal = Decimal("0")
    account_number: Optional[str] = None


def generate_account_number() -> str:
    return str(uuid.uuid4())


class AccountLifecycle:
    """
    Opens and closes accounts.

    Creation validates the owning customer with the registry before anything
    is written; a failed validation leaves the store untouched.
    """

    def __init__(self, store: AccountStore, validator: CustomerValidator):
        self.store = store
        self.validator = validator

    def create(self, draft: AccountDraft) -> Result[Account]:
        validation = self.validator.validate(draft.customer_id)
        if isinstance(validation, Failure):
            return validation

        if draft.account_number is not None:
            if self.store.find_by_account_number(draft.account_number) is not None:
                return Failure(
                    ErrorKind.DUPLICATE_ACCOUNT_NUMBER,
                    f"Account number {draft.account_number} already exists",
                    customer_id=draft.customer_id,
                )

        account = Account(
            account_number=draft.account_number or generate_account_number(),
            balance=draft.balance if draft.balance is not None else Decimal("0"),
            account_type=draft.account_type,
            customer_id=draft.customer_id,
        )
        try:
            return Success(self.store.save(account))
        except DuplicateAccountError as e:
            # Lost a race with a concurrent create using the same number
            return Failure(
                ErrorKind.DUPLICATE_ACCOUNT_NUMBER,
                str(e),
                customer_id=draft.customer_id,
            )

    def delete(self, account_id: int) -> Result[Account]:
        """
        Delete the account and return its state from just before deletion.
        """
        account = self.store.find_by_id(account_id)
        if account is None:
            return account_not_found(account_id)

        snapshot = account.snapshot()
        try:
            self.store.delete(account)
        except Exception as e:
            logger.warning("Deletion of account %s failed: %s", account_id, e)
            return Failure(
                ErrorKind.DELETION_FAILED,
                f"Error deleting account {account_id}",
                account_id=account_id,
                detail=str(e),
            )
        return Success(snapshot)
