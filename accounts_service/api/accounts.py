"""
Account API endpoints.
Handles account creation, retrieval, deposits, withdrawals and deletion.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from accounts_service.api.deps import get_lifecycle, get_queries, get_transaction_engine
from accounts_service.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountBalance,
    AmountRequest,
    BalanceUpdate,
)
from accounts_service.services.lifecycle import AccountDraft, AccountLifecycle
from accounts_service.services.queries import QueryFacade
from accounts_service.services.results import ErrorKind, Failure, Result
from accounts_service.services.transactions import TransactionEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["Accounts"])

STATUS_BY_KIND = {
    ErrorKind.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CUSTOMER_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INSUFFICIENT_SAVINGS_BALANCE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.OVERDRAFT_LIMIT_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DELETION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.DUPLICATE_ACCOUNT_NUMBER: status.HTTP_400_BAD_REQUEST,
}


def unwrap(result: Result):
    """
    Return the value of a successful result, or raise the matching HTTP error.
    """
    if isinstance(result, Failure):
        logger.info("Request rejected: %s (%s)", result.kind.value, result.message)
        raise HTTPException(
            status_code=STATUS_BY_KIND[result.kind],
            detail=result.message
        )
    return result.value


def account_not_found(account_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Account {account_id} not found"
    )


@router.post("/", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    account_data: AccountCreate,
    lifecycle: AccountLifecycle = Depends(get_lifecycle)
):
    """
    Create a new account.

    - **account_type**: SAVINGS or CHECKING
    - **customer_id**: Owner, must exist in the customer registry
    - **balance**: Starting balance (default: 0.00)
    - **account_number**: Optional, generated when omitted
    """
    draft = AccountDraft(
        account_type=account_data.account_type,
        customer_id=account_data.customer_id,
        balance=account_data.balance,
        account_number=account_data.account_number,
    )
    return unwrap(lifecycle.create(draft))


@router.get("/", response_model=List[AccountResponse])
def list_accounts(
    skip: int = 0,
    limit: Optional[int] = 100,
    queries: QueryFacade = Depends(get_queries)
):
    """
    List all accounts with pagination.

    - **skip**: Number of records to skip (default: 0)
    - **limit**: Maximum number of records to return (default: 100)
    """
    return queries.list_accounts(skip=skip, limit=limit)


@router.get("/customer/{customer_id}", response_model=bool)
def customer_has_accounts(
    customer_id: int,
    queries: QueryFacade = Depends(get_queries)
):
    """
    Whether the customer owns at least one account.
    """
    return queries.customer_has_accounts(customer_id)


@router.get("/customer/{customer_id}/active", response_model=bool)
def customer_has_active_accounts(
    customer_id: int,
    queries: QueryFacade = Depends(get_queries)
):
    """
    Whether the customer has any open accounts.
    """
    return len(queries.list_by_customer(customer_id)) > 0


@router.get("/customer/{customer_id}/accounts", response_model=List[AccountResponse])
def list_customer_accounts(
    customer_id: int,
    queries: QueryFacade = Depends(get_queries)
):
    """
    All accounts owned by a customer. Empty list when there are none.
    """
    return queries.list_by_customer(customer_id)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    queries: QueryFacade = Depends(get_queries)
):
    """
    Get account details by ID.
    """
    account = queries.get_account(account_id)
    if account is None:
        raise account_not_found(account_id)
    return account


@router.get("/{account_id}/balance", response_model=AccountBalance)
def get_account_balance(
    account_id: int,
    queries: QueryFacade = Depends(get_queries)
):
    """
    Get account balance.
    """
    account = queries.get_account(account_id)
    if account is None:
        raise account_not_found(account_id)
    return account


@router.put("/{account_id}/deposit", response_model=AccountResponse)
def deposit(
    account_id: int,
    payload: AmountRequest,
    engine: TransactionEngine = Depends(get_transaction_engine)
):
    """
    Deposit a positive amount.
    """
    return unwrap(engine.deposit(account_id, payload.amount))


@router.put("/{account_id}/withdrawal", response_model=AccountResponse)
def withdraw(
    account_id: int,
    payload: AmountRequest,
    engine: TransactionEngine = Depends(get_transaction_engine)
):
    """
    Withdraw a positive amount.

    Savings accounts cannot go below zero; checking accounts may reach the
    overdraft floor of -500 but not pass it.
    """
    return unwrap(engine.withdraw(account_id, payload.amount))


@router.put("/{account_id}/balance", response_model=AccountResponse)
def update_balance(
    account_id: int,
    payload: BalanceUpdate,
    engine: TransactionEngine = Depends(get_transaction_engine),
    queries: QueryFacade = Depends(get_queries)
):
    """
    Administrative override of the balance.
    Withdrawal limits are not applied.
    """
    if not engine.set_balance(account_id, payload):
        raise account_not_found(account_id)
    logger.info("Balance of account %s overwritten to %s", account_id, payload.balance)
    return queries.get_account(account_id)


@router.delete("/{account_id}", response_model=AccountResponse)
def delete_account(
    account_id: int,
    lifecycle: AccountLifecycle = Depends(get_lifecycle)
):
    """
    Delete an account. Returns the account as it was before deletion.
    """
    return unwrap(lifecycle.delete(account_id))
