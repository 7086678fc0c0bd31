"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from carteira.models.transaction import TransactionKind


class CategoryCreate(BaseModel):
    """Schema for creating a category."""
    name: Optional[str] = None
    kind: TransactionKind = TransactionKind.expense


class CategoryResponse(BaseModel):
    """Schema for category response."""
    id: str
    name: str
    kind: TransactionKind
    created_at: datetime

    class Config:
        from_attributes = True


class CategoryList(BaseModel):
    """Schema for listing categories."""
    items: list[CategoryResponse]
    total: int


class CategoryOptions(BaseModel):
    kind: TransactionKind
    names: list[str]
