"""
Dashboard schemas.
"""

from pydantic import BaseModel
from decimal import Decimal
from typing import List, Optional

from carteira.schemas.transaction import TransactionResponse


class MonthTrend(BaseModel):
    month: str
    year: int
    month_number: int
    income: Decimal
    expenses: Decimal
    net: Decimal


class HighlightsResponse(BaseModel):
    largest_expense: Optional[TransactionResponse]
    most_frequent_category: str


class DashboardSummary(BaseModel):
    balance: Decimal
    total_income: Decimal
    total_expenses: Decimal
    monthly: List[MonthTrend]
    highlights: HighlightsResponse
