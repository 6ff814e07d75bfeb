"""
Tests for deposits, withdrawals and the balance override.
"""

from decimal import Decimal

import pytest

from accounts_service.models.account import AccountType
from accounts_service.schemas.account import BalanceUpdate
from accounts_service.services.results import ErrorKind, Failure, Success
from accounts_service.services.transactions import TransactionEngine, check_withdrawal


@pytest.fixture
def engine(store):
    return TransactionEngine(store)


# ==================== AMOUNT VALIDATION ====================

@pytest.mark.parametrize("amount", ["0", "-50", "-0.01"])
def test_deposit_non_positive_amount_is_rejected(engine, store, amount):
    """Non-positive deposits fail without touching the store."""
    result = engine.deposit(1, Decimal(amount))

    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.INVALID_AMOUNT
    assert store.events == []


@pytest.mark.parametrize("amount", ["0", "-100"])
def test_withdraw_non_positive_amount_is_rejected(engine, store, savings, amount):
    """Non-positive withdrawals fail without touching the store."""
    result = engine.withdraw(savings.id, Decimal(amount))

    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.INVALID_AMOUNT
    assert store.events == []
    assert savings.balance == Decimal("1500")


# ==================== DEPOSIT ====================

def test_deposit_adds_exact_amount(engine, store, savings):
    """Deposit adds the amount with decimal precision."""
    result = engine.deposit(savings.id, Decimal("0.10"))

    assert isinstance(result, Success)
    assert result.value.balance == Decimal("1500.10")
    assert store.calls("save") == [("save", savings.id)]


def test_deposit_reads_with_row_lock(engine, store, savings):
    """Deposit locks the row it mutates."""
    engine.deposit(savings.id, Decimal("10"))

    assert ("find_by_id", savings.id, True) in store.events


def test_deposit_unknown_account(engine, store):
    """Deposit to a missing account reports ACCOUNT_NOT_FOUND and rolls back."""
    result = engine.deposit(999, Decimal("10"))

    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.ACCOUNT_NOT_FOUND
    assert result.account_id == 999
    assert store.calls("save") == []
    assert store.calls("rollback") == [("rollback",)]


def test_deposit_into_overdrawn_checking(engine, checking):
    """Deposits have no lower or upper bound on the resulting balance."""
    result = engine.deposit(checking.id, Decimal("1000000"))

    assert result.value.balance == Decimal("999600")


# ==================== SAVINGS WITHDRAWAL ====================

def test_savings_withdraw_more_than_balance(engine, store, savings):
    """Withdrawing 2000 from a savings balance of 1500 is refused."""
    result = engine.withdraw(savings.id, Decimal("2000"))

    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.INSUFFICIENT_SAVINGS_BALANCE
    assert savings.balance == Decimal("1500")
    assert store.calls("save") == []
    assert store.calls("rollback") == [("rollback",)]


def test_savings_withdraw_entire_balance(engine, savings):
    """Emptying a savings account exactly is allowed."""
    result = engine.withdraw(savings.id, Decimal("1500"))

    assert isinstance(result, Success)
    assert result.value.balance == Decimal("0")


def test_savings_never_negative_over_sequence(engine, savings):
    """Any sequence of operations leaves a savings balance at or above zero."""
    operations = [
        ("withdraw", "700"), ("withdraw", "700"), ("withdraw", "700"),
        ("deposit", "50"), ("withdraw", "150.01"), ("withdraw", "150"),
        ("withdraw", "0.01"),
    ]
    for name, amount in operations:
        getattr(engine, name)(savings.id, Decimal(amount))
        assert savings.balance >= 0

    assert savings.balance == Decimal("0")


# ==================== CHECKING WITHDRAWAL ====================

def test_checking_withdraw_past_overdraft_floor(engine, store, checking):
    """-400 minus 200 would be -600, below the floor."""
    result = engine.withdraw(checking.id, Decimal("200"))

    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.OVERDRAFT_LIMIT_EXCEEDED
    assert checking.balance == Decimal("-400")
    assert store.calls("save") == []


def test_checking_withdraw_to_exact_floor(engine, checking):
    """-400 minus 100 lands exactly on -500, which is allowed."""
    result = engine.withdraw(checking.id, Decimal("100"))

    assert isinstance(result, Success)
    assert result.value.balance == Decimal("-500")


def test_checking_withdraw_one_cent_past_floor(engine, checking):
    """The floor is exact to the cent."""
    result = engine.withdraw(checking.id, Decimal("100.01"))

    assert result.kind == ErrorKind.OVERDRAFT_LIMIT_EXCEEDED
    assert checking.balance == Decimal("-400")


def test_checking_can_overdraw_from_positive(engine, store):
    """A checking account may go negative down to the floor."""
    account = store.add(AccountType.CHECKING, "1000")

    result = engine.withdraw(account.id, Decimal("1500"))

    assert result.value.balance == Decimal("-500")


def test_withdraw_unknown_account(engine, store):
    result = engine.withdraw(42, Decimal("1"))

    assert result.kind == ErrorKind.ACCOUNT_NOT_FOUND
    assert store.calls("save") == []


def test_check_withdrawal_allows_within_policy(store):
    account = store.add(AccountType.SAVINGS, "10")

    assert check_withdrawal(account, Decimal("10")) is None
    assert check_withdrawal(account, Decimal("10.01")).kind == ErrorKind.INSUFFICIENT_SAVINGS_BALANCE


# ==================== BALANCE OVERRIDE ====================

def test_set_balance_bypasses_withdrawal_policy(engine, savings):
    """The administrative override can set any balance, even a negative savings one."""
    updated = engine.set_balance(savings.id, BalanceUpdate(balance=Decimal("-2000")))

    assert updated is True
    assert savings.balance == Decimal("-2000")


def test_set_balance_unknown_account_returns_false(engine, store):
    """A missing account is a no-op, not an error."""
    updated = engine.set_balance(404, BalanceUpdate(balance=Decimal("10")))

    assert updated is False
    assert store.calls("save") == []
