"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
from datetime import date

from carteira.dependencies import get_current_user, get_store
from carteira.models.user import User
from carteira.schemas.transaction import (
    ExpenseCreate,
    IncomeCreate,
    TransactionListResponse,
    TransactionResponse,
)
from carteira.services import transaction_service
from carteira.services.filter_service import FilterSpec, KindFilter, apply_filters
from carteira.services.store import TransactionStore

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    kind: KindFilter = KindFilter.any,
    category: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    search: Optional[str] = Query(None, description="Matches description or category"),
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """
    List the user's transactions, newest first.
    Without dates the range is the current month up to today.
    """
    spec = FilterSpec.for_today(
        date.today(),
        kind=kind,
        category_contains=category,
        date_from=date_from,
        date_to=date_to,
        search_text=search,
    )
    transactions = apply_filters(store.fetch_transactions(user.id), spec)

    return TransactionListResponse(
        items=[TransactionResponse.model_validate(t) for t in transactions],
        total=len(transactions),
        date_from=spec.date_from,
        date_to=spec.date_to,
    )


@router.post("/expenses", response_model=TransactionResponse, status_code=201)
def create_expense(
    expense: ExpenseCreate,
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """Record an expense"""
    return transaction_service.create_expense(
        store,
        user.id,
        amount=expense.amount,
        description=expense.description,
        category=expense.category,
        txn_date=expense.date,
        receipt_ref=expense.receipt_ref,
    )


@router.post("/incomes", response_model=TransactionResponse, status_code=201)
def create_income(
    income: IncomeCreate,
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """Record an income"""
    return transaction_service.create_income(
        store,
        user.id,
        amount=income.amount,
        description=income.description,
        source=income.source,
        txn_date=income.date,
    )


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """Get a single transaction"""
    transaction = store.get_transaction(user.id, transaction_id)
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """Delete a transaction permanently"""
    if not transaction_service.delete_transaction(store, user.id, transaction_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
    return None
