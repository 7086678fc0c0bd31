"""
Category seeding and management.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from carteira.exceptions import StoreError, ValidationError
from carteira.models.category import Category
from carteira.models.transaction import TransactionKind
from carteira.models.user import User
from carteira.services.store import SqlAlchemyStore, TransactionStore

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES: List[Tuple[str, TransactionKind]] = [
    # Expenses
    ("Alimentação", TransactionKind.expense),
    ("Transporte", TransactionKind.expense),
    ("Moradia", TransactionKind.expense),
    ("Saúde", TransactionKind.expense),
    ("Educação", TransactionKind.expense),
    ("Lazer", TransactionKind.expense),
    ("Compras", TransactionKind.expense),
    ("Outros", TransactionKind.expense),
    # Income
    ("Salário", TransactionKind.income),
    ("Freelance", TransactionKind.income),
    ("Investimentos", TransactionKind.income),
    ("Presentes", TransactionKind.income),
    ("Outros", TransactionKind.income),
]

DEFAULT_EXPENSE_NAMES = [name for name, kind in DEFAULT_CATEGORIES if kind == TransactionKind.expense]

MAX_NAME_LENGTH = 100


def seed_default_categories(store: TransactionStore, owner_id: str) -> List[Category]:
    """
    Insert the full default category set for an owner in one batch.

    There is no duplicate check: calling this twice creates two full sets.
    Raises StoreError when the insert fails.
    """
    categories = [
        Category(owner_id=owner_id, name=name, kind=kind)
        for name, kind in DEFAULT_CATEGORIES
    ]
    try:
        created = store.insert_categories(categories)
    except StoreError:
        logger.error(f"Failed to seed default categories for user {owner_id}")
        raise
    logger.info(f"Seeded {len(created)} default categories for user {owner_id}")
    return created


def is_new_account(created_at: datetime, now: datetime, window_minutes: int) -> bool:
    """True while the account is younger than the window."""
    return now - created_at < timedelta(minutes=window_minutes)


def ensure_default_categories(db: Session, user: User) -> bool:
    """
    Seed defaults once per user, guarded by ``user.categories_seeded``.

    Returns True when the user has seeded categories afterwards. Store
    failures are logged and reported as False; they never undo the account.
    """
    if user.categories_seeded:
        return True

    # Flag and categories are committed together by the batched insert
    user.categories_seeded = True
    try:
        seed_default_categories(SqlAlchemyStore(db), user.id)
    except StoreError:
        user.categories_seeded = False
        return False

    return True


def create_category(
    store: TransactionStore,
    owner_id: str,
    name: Optional[str],
    kind: TransactionKind
) -> Category:
    """Create one user category. Duplicate names are allowed."""
    clean_name = (name or "").strip()
    if not clean_name:
        raise ValidationError("name", "Category name is required")
    if len(clean_name) > MAX_NAME_LENGTH:
        raise ValidationError("name", f"Category name must have at most {MAX_NAME_LENGTH} characters")

    created = store.insert_categories([Category(owner_id=owner_id, name=clean_name, kind=kind)])
    return created[0]


def delete_category(store: TransactionStore, owner_id: str, category_id: str) -> bool:
    """Delete a category; transactions using its name keep that name."""
    return store.delete_category(owner_id, category_id)


def category_options(store: TransactionStore, owner_id: str, kind: TransactionKind) -> List[str]:
    """
    Names offered by the entry forms.
    Expense forms fall back to the default names when the user has none.
    """
    names = [c.name for c in store.fetch_categories(owner_id, kind)]
    if not names and kind == TransactionKind.expense:
        return list(DEFAULT_EXPENSE_NAMES)
    return names
