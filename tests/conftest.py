"""
Shared fixtures for the account service tests.
"""

import pytest

from accounts_service.models.account import AccountType
from fakes import InMemoryAccountStore, StubCustomerValidator


@pytest.fixture
def events():
    return []


@pytest.fixture
def store(events):
    return InMemoryAccountStore(events)


@pytest.fixture
def validator(events):
    return StubCustomerValidator(valid_ids={1, 2}, events=events)


@pytest.fixture
def savings(store):
    return store.add(AccountType.SAVINGS, "1500")


@pytest.fixture
def checking(store):
    return store.add(AccountType.CHECKING, "-400")
