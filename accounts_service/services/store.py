"""
Account persistence.

AccountStore is the interface the services depend on; SqlAccountStore
implements it on a SQLAlchemy session.
"""

import abc
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from accounts_service.models.account import Account

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the underlying database rejects a write."""


class DuplicateAccountError(StoreError):
    """Raised when an insert collides with an existing account number."""


class AccountStore(abc.ABC):
    """
    CRUD operations over accounts, keyed by id, account number or customer id.
    """

    @abc.abstractmethod
    def save(self, account: Account) -> Account:
        """
        Insert or update the account and commit. Returns the stored row.
        Raises DuplicateAccountError on an account number collision.
        """

    @abc.abstractmethod
    def find_by_id(self, account_id: int, lock: bool = False) -> Optional[Account]:
        """
        Look up one account.
        With lock=True the row stays locked until the next save or rollback.
        """

    @abc.abstractmethod
    def find_by_account_number(self, account_number: str) -> Optional[Account]:
        ...

    @abc.abstractmethod
    def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Account]:
        ...

    @abc.abstractmethod
    def find_by_customer_id(self, customer_id: int) -> List[Account]:
        ...

    @abc.abstractmethod
    def exists_by_customer_id(self, customer_id: int) -> bool:
        ...

    @abc.abstractmethod
    def delete(self, account: Account) -> None:
        """Remove the account and commit. Raises StoreError on failure."""

    @abc.abstractmethod
    def rollback(self) -> None:
        """Abandon the current unit of work and release any row locks."""


class SqlAccountStore(AccountStore):
    """AccountStore backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, account: Account) -> Account:
        self.db.add(account)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateAccountError(
                f"Account number {account.account_number} already exists"
            ) from e
        self.db.refresh(account)
        return account

    def find_by_id(self, account_id: int, lock: bool = False) -> Optional[Account]:
        query = self.db.query(Account).filter(Account.id == account_id)
        if lock:
            # SELECT ... FOR UPDATE, serializes writers on the same row
            query = query.with_for_update()
        return query.first()

    def find_by_account_number(self, account_number: str) -> Optional[Account]:
        return self.db.query(Account).filter(
            Account.account_number == account_number
        ).first()

    def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Account]:
        query = self.db.query(Account).order_by(Account.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def find_by_customer_id(self, customer_id: int) -> List[Account]:
        return self.db.query(Account).filter(
            Account.customer_id == customer_id
        ).order_by(Account.id).all()

    def exists_by_customer_id(self, customer_id: int) -> bool:
        return bool(self.db.query(
            self.db.query(Account).filter(Account.customer_id == customer_id).exists()
        ).scalar())

    def delete(self, account: Account) -> None:
        try:
            self.db.delete(account)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to delete account %s", account.id)
            raise StoreError(f"Could not delete account {account.id}") from e

    def rollback(self) -> None:
        self.db.rollback()
