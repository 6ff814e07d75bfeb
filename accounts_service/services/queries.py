"""
Read-only account lookups.
"""

from typing import List, Optional

from accounts_service.models.account import Account
from accounts_service.services.store import AccountStore


class QueryFacade:
    def __init__(self, store: AccountStore):
        self.store = store

    def get_account(self, account_id: int) -> Optional[Account]:
        return self.store.find_by_id(account_id)

    def list_accounts(self, skip: int = 0, limit: Optional[int] = None) -> List[Account]:
        return self.store.find_all(skip=skip, limit=limit)

    def list_by_customer(self, customer_id: int) -> List[Account]:
        return list(self.store.find_by_customer_id(customer_id) or [])

    def customer_has_accounts(self, customer_id: int) -> bool:
        return self.store.exists_by_customer_id(customer_id)
