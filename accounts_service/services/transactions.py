"""
Deposits, withdrawals and the administrative balance override.

Every mutation reads the account with a row lock, checks the rules, then
writes. A rule violation rolls the unit of work back so the balance and the
lock are both released untouched.
"""

from decimal import Decimal
from typing import Optional

from accounts_service.models.account import Account, AccountType
from accounts_service.schemas.account import BalanceUpdate
from accounts_service.services.results import (
    ErrorKind,
    Failure,
    Result,
    Success,
    account_not_found,
    invalid_amount,
)
from accounts_service.services.store import AccountStore

# Most negative balance a checking account may reach
OVERDRAFT_FLOOR = Decimal("-500")


def check_withdrawal(account: Account, amount: Decimal) -> Optional[Failure]:
    """
    Apply the withdrawal policy for the account's type.
    Returns None when the withdrawal is allowed. Both floors are inclusive.
    """
    if account.account_type == AccountType.SAVINGS and account.balance < amount:
        return Failure(
            ErrorKind.INSUFFICIENT_SAVINGS_BALANCE,
            f"Insufficient balance for withdrawal in savings account. "
            f"Balance: {account.balance}, Required: {amount}",
            account_id=account.id,
        )

    if account.account_type == AccountType.CHECKING and account.balance - amount < OVERDRAFT_FLOOR:
        return Failure(
            ErrorKind.OVERDRAFT_LIMIT_EXCEEDED,
            f"Withdrawal exceeds overdraft limit of {OVERDRAFT_FLOOR} for checking account. "
            f"Balance: {account.balance}, Requested: {amount}",
            account_id=account.id,
        )

    return None


class TransactionEngine:
    """Balance mutations for a single account."""

    def __init__(self, store: AccountStore):
        self.store = store

    def deposit(self, account_id: int, amount: Decimal) -> Result[Account]:
        if amount <= 0:
            return invalid_amount("Deposit")

        account = self.store.find_by_id(account_id, lock=True)
        if account is None:
            return self._abort(account_not_found(account_id))

        account.balance = account.balance + amount
        return Success(self.store.save(account))

    def withdraw(self, account_id: int, amount: Decimal) -> Result[Account]:
        if amount <= 0:
            return invalid_amount("Withdrawal")

        account = self.store.find_by_id(account_id, lock=True)
        if account is None:
            return self._abort(account_not_found(account_id))

        violation = check_withdrawal(account, amount)
        if violation is not None:
            return self._abort(violation)

        account.balance = account.balance - amount
        return Success(self.store.save(account))

    def set_balance(self, account_id: int, update: BalanceUpdate) -> bool:
        """
        Overwrite the balance without applying the withdrawal policy.
        Returns False when the account does not exist.
        """
        account = self.store.find_by_id(account_id, lock=True)
        if account is None:
            self.store.rollback()
            return False

        account.balance = update.balance
        self.store.save(account)
        return True

    def _abort(self, failure: Failure) -> Failure:
        self.store.rollback()
        return failure
