"""
Transaction schemas.
"""

from pydantic import BaseModel
from typing import Optional, Union
from datetime import date, datetime
from decimal import Decimal

from carteira.models.transaction import TransactionKind


class ExpenseCreate(BaseModel):
    """Expense form. Fields are checked by the service, not here."""
    amount: Optional[Union[Decimal, str]] = None
    description: Optional[str] = None
    category: Optional[str] = None
    date: Optional[str] = None
    receipt_ref: Optional[str] = None


class IncomeCreate(BaseModel):
    """Income form; ``source`` becomes the transaction category."""
    amount: Optional[Union[Decimal, str]] = None
    description: Optional[str] = None
    source: Optional[str] = None
    date: Optional[str] = None


class TransactionResponse(BaseModel):
    id: str
    owner_id: str
    kind: TransactionKind
    amount: Decimal
    description: str
    category: str
    date: date
    receipt_ref: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class TransactionListResponse(BaseModel):
    items: list[TransactionResponse]
    total: int
    date_from: date
    date_to: date
