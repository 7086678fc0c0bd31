"""
Category API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import Optional

from carteira.dependencies import get_current_user, get_store
from carteira.models.transaction import TransactionKind
from carteira.models.user import User
from carteira.schemas.category import (
    CategoryCreate,
    CategoryList,
    CategoryOptions,
    CategoryResponse,
)
from carteira.services import category_service
from carteira.services.store import TransactionStore

router = APIRouter()


@router.get("", response_model=CategoryList)
def list_categories(
    kind: Optional[TransactionKind] = None,
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """List the user's categories, newest first."""
    categories = store.fetch_categories(user.id, kind)
    return CategoryList(
        items=[CategoryResponse.model_validate(c) for c in categories],
        total=len(categories)
    )


@router.get("/options", response_model=CategoryOptions)
def category_options(
    kind: TransactionKind = TransactionKind.expense,
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """Category names for the expense and income forms."""
    return CategoryOptions(
        kind=kind,
        names=category_service.category_options(store, user.id, kind)
    )


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """Create a new category."""
    return category_service.create_category(store, user.id, category.name, category.kind)


@router.post("/defaults", response_model=CategoryList, status_code=201)
def seed_defaults(
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """
    Add the default categories to an existing account.
    Not idempotent: each call adds another full set.
    """
    created = category_service.seed_default_categories(store, user.id)
    return CategoryList(
        items=[CategoryResponse.model_validate(c) for c in created],
        total=len(created)
    )


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: str,
    user: User = Depends(get_current_user),
    store: TransactionStore = Depends(get_store)
):
    """Delete a category. Transactions keep the category name they were saved with."""
    if not category_service.delete_category(store, user.id, category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return None
