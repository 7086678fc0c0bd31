"""
Transaction creation, validation and deletion.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from carteira.exceptions import ValidationError
from carteira.models.transaction import Transaction, TransactionKind
from carteira.services.store import TransactionStore

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

# Numeric(12, 2) leaves ten integer digits
MAX_AMOUNT = Decimal("1e10")

MAX_CATEGORY_LENGTH = 100


@dataclass(frozen=True)
class NewTransaction:
    """Validated input for a transaction that has not been stored yet."""
    kind: TransactionKind
    amount: Decimal
    description: str
    category: str
    date: date
    receipt_ref: Optional[str] = None


def parse_amount(raw: Any) -> Decimal:
    """
    Parse a positive amount with two decimal places.
    Strings may use a comma as decimal separator ("12,50").
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError("amount", "Amount is required")
    if isinstance(raw, bool):
        raise ValidationError("amount", "Amount must be a number")

    try:
        if isinstance(raw, str):
            value = Decimal(raw.strip().replace(",", "."))
        else:
            value = Decimal(str(raw))
    except InvalidOperation:
        raise ValidationError("amount", "Amount must be a number")

    if not value.is_finite() or value <= 0:
        raise ValidationError("amount", "Amount must be greater than zero")
    if value >= MAX_AMOUNT:
        raise ValidationError("amount", "Amount is too large")

    try:
        value = value.quantize(CENTS)
    except InvalidOperation:
        raise ValidationError("amount", "Amount is too large")
    if value <= 0:
        raise ValidationError("amount", "Amount must be greater than zero")
    return value


def parse_date(raw: Any, today: date) -> date:
    """Calendar date of a transaction; missing means today."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return today
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        try:
            return date.fromisoformat(raw.strip()[:10])
        except ValueError:
            raise ValidationError("date", f"Invalid date: {raw}")
    raise ValidationError("date", f"Invalid date: {raw!r}")


def _required_text(field: str, raw: Optional[str], label: str, max_length: Optional[int] = None) -> str:
    value = (raw or "").strip()
    if not value:
        raise ValidationError(field, f"{label} is required")
    if max_length is not None and len(value) > max_length:
        raise ValidationError(field, f"{label} must have at most {max_length} characters")
    return value


def validate_transaction(
    kind: TransactionKind,
    amount: Any,
    description: Optional[str],
    category: Optional[str],
    txn_date: Any = None,
    receipt_ref: Optional[str] = None,
    today: Optional[date] = None,
) -> NewTransaction:
    """Validate raw form input. Raises ValidationError on the first bad field."""
    description = _required_text("description", description, "Description")
    category = _required_text("category", category, "Category", MAX_CATEGORY_LENGTH)
    return NewTransaction(
        kind=kind,
        amount=parse_amount(amount),
        description=description,
        category=category,
        date=parse_date(txn_date, today or date.today()),
        receipt_ref=receipt_ref or None,
    )


def _store_new(store: TransactionStore, owner_id: str, new: NewTransaction) -> Transaction:
    transaction = Transaction(
        owner_id=owner_id,
        kind=new.kind,
        amount=new.amount,
        description=new.description,
        category=new.category,
        date=new.date,
        receipt_ref=new.receipt_ref,
    )
    created = store.insert_transaction(transaction)
    logger.info(f"Created {new.kind.value} {created.id} for user {owner_id}")
    return created


def create_expense(
    store: TransactionStore,
    owner_id: str,
    amount: Any,
    description: Optional[str],
    category: Optional[str],
    txn_date: Any = None,
    receipt_ref: Optional[str] = None,
    today: Optional[date] = None,
) -> Transaction:
    """Record an expense, optionally with a receipt image reference."""
    new = validate_transaction(
        TransactionKind.expense, amount, description, category,
        txn_date=txn_date, receipt_ref=receipt_ref, today=today,
    )
    return _store_new(store, owner_id, new)


def create_income(
    store: TransactionStore,
    owner_id: str,
    amount: Any,
    description: Optional[str],
    source: Optional[str],
    txn_date: Any = None,
    today: Optional[date] = None,
) -> Transaction:
    """Record an income; its source is stored as the category."""
    try:
        new = validate_transaction(
            TransactionKind.income, amount, description, source,
            txn_date=txn_date, today=today,
        )
    except ValidationError as e:
        if e.field == "category":
            raise ValidationError("source", e.message.replace("Category", "Source"))
        raise
    return _store_new(store, owner_id, new)


def delete_transaction(store: TransactionStore, owner_id: str, transaction_id: str) -> bool:
    """Remove a transaction permanently. False when the owner has no such record."""
    deleted = store.delete_transaction(owner_id, transaction_id)
    if deleted:
        logger.info(f"Deleted transaction {transaction_id} for user {owner_id}")
    return deleted
