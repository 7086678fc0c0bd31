"""
Dashboard aggregations over a transaction sequence.

All functions are pure and total: any finite sequence, including an empty
one, yields a result. Amounts are summed as Decimal without rounding.
"""

import enum
from collections import Counter
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from carteira.models.transaction import TransactionKind

ZERO = Decimal("0")

NO_CATEGORY = "Nenhuma"

MonthKey = Tuple[int, int]


@dataclass
class MonthBucket:
    month_key: MonthKey
    income: Decimal = ZERO
    expenses: Decimal = ZERO

    @property
    def label(self) -> str:
        year, month = self.month_key
        return f"{year:04d}-{month:02d}"


@dataclass(frozen=True)
class Highlights:
    largest_expense: Optional[Any]
    most_frequent_category: str


def _is_kind(transaction: Any, kind: TransactionKind) -> bool:
    value = transaction.kind
    if isinstance(value, enum.Enum):
        value = value.value
    return value == kind.value


def _amount(transaction: Any) -> Decimal:
    amount = transaction.amount
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))


def sum_kind(transactions: Iterable[Any], kind: TransactionKind) -> Decimal:
    return sum((_amount(t) for t in transactions if _is_kind(t, kind)), ZERO)


def compute_balance(transactions: Iterable[Any]) -> Decimal:
    """Income total minus expense total."""
    transactions = list(transactions)
    return sum_kind(transactions, TransactionKind.income) - sum_kind(transactions, TransactionKind.expense)


def compute_monthly_series(transactions: Iterable[Any]) -> List[MonthBucket]:
    """
    Group by calendar (year, month) of each transaction's date.
    Buckets come out in order of first appearance; callers sort if they
    need chronological order.
    """
    buckets: Dict[MonthKey, MonthBucket] = {}
    for t in transactions:
        key = (t.date.year, t.date.month)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = MonthBucket(month_key=key)
        if _is_kind(t, TransactionKind.income):
            bucket.income += _amount(t)
        elif _is_kind(t, TransactionKind.expense):
            bucket.expenses += _amount(t)
    return list(buckets.values())


def largest_expense(transactions: Iterable[Any]) -> Optional[Any]:
    """First expense with the maximum amount, or None without expenses."""
    best = None
    for t in transactions:
        if not _is_kind(t, TransactionKind.expense):
            continue
        if best is None or _amount(t) > _amount(best):
            best = t
    return best


def most_frequent_category(transactions: Iterable[Any]) -> str:
    """
    Category name used by the most transactions of either kind.
    Ties go to the lexicographically smallest name.
    """
    counts = Counter(t.category or "" for t in transactions)
    if not counts:
        return NO_CATEGORY
    top = max(counts.values())
    return min(name for name, count in counts.items() if count == top)


def compute_highlights(transactions: Iterable[Any]) -> Highlights:
    transactions = list(transactions)
    return Highlights(
        largest_expense=largest_expense(transactions),
        most_frequent_category=most_frequent_category(transactions),
    )
