"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends
from typing import List

from carteira.dependencies import get_current_user, get_store
from carteira.models.transaction import TransactionKind
from carteira.models.user import User
from carteira.schemas.dashboard import DashboardSummary, HighlightsResponse, MonthTrend
from carteira.schemas.transaction import TransactionResponse
from carteira.services.aggregation_service import (
    MonthBucket,
    compute_balance,
    compute_highlights,
    compute_monthly_series,
    sum_kind,
)
from carteira.services.store import TransactionStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _month_trends(buckets: List[MonthBucket]) -> List[MonthTrend]:
    return [
        MonthTrend(
            month=b.label,
            year=b.month_key[0],
            month_number=b.month_key[1],
            income=b.income,
            expenses=b.expenses,
            net=b.income - b.expenses,
        )
        for b in sorted(buckets, key=lambda b: b.month_key)
    ]


def _highlights(transactions) -> HighlightsResponse:
    highlights = compute_highlights(transactions)
    largest = highlights.largest_expense
    return HighlightsResponse(
        largest_expense=TransactionResponse.model_validate(largest) if largest is not None else None,
        most_frequent_category=highlights.most_frequent_category,
    )


@router.get("", response_model=DashboardSummary)
def get_dashboard(
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """
    Get the dashboard for all of the user's transactions.
    Returns: balance, totals, monthly series (chronological), highlights
    """
    transactions = store.fetch_transactions(user.id)

    return DashboardSummary(
        balance=compute_balance(transactions),
        total_income=sum_kind(transactions, TransactionKind.income),
        total_expenses=sum_kind(transactions, TransactionKind.expense),
        monthly=_month_trends(compute_monthly_series(transactions)),
        highlights=_highlights(transactions),
    )


@router.get("/monthly", response_model=list[MonthTrend])
def get_monthly_series(
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """Income and expenses per calendar month, oldest first"""
    return _month_trends(compute_monthly_series(store.fetch_transactions(user.id)))


@router.get("/highlights", response_model=HighlightsResponse)
def get_highlights(
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """Largest expense and most used category"""
    return _highlights(store.fetch_transactions(user.id))
