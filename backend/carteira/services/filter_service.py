"""
Filtering for the transaction list.

Pure functions over an in-memory transaction sequence; no database access.
Transactions are read by attribute (kind, category, description, date), so
ORM rows and plain objects both work.
"""

import enum
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, List, Optional


class KindFilter(str, enum.Enum):
    """Kind constraint for the list screen."""
    any = "any"
    income = "income"
    expense = "expense"


def start_of_month(day: date) -> date:
    return date(day.year, day.month, 1)


def as_calendar_date(value: Any) -> date:
    """Drop any time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    return value


def _kind_value(kind: Any) -> str:
    return kind.value if isinstance(kind, enum.Enum) else str(kind)


@dataclass(frozen=True)
class FilterSpec:
    """Criteria combined with AND. Empty strings disable text criteria.

    Date bounds are inclusive and always applied. When omitted they default
    to the first day of the current month through today; pass explicit wide
    bounds to see everything.
    """

    kind: KindFilter = KindFilter.any
    category_contains: str = ""
    date_from: date = field(default_factory=lambda: start_of_month(date.today()))
    date_to: date = field(default_factory=date.today)
    search_text: str = ""

    @classmethod
    def for_today(
        cls,
        today: date,
        kind: KindFilter = KindFilter.any,
        category_contains: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        search_text: Optional[str] = None,
    ) -> "FilterSpec":
        """Build a spec, filling missing bounds relative to ``today``."""
        return cls(
            kind=kind,
            category_contains=category_contains or "",
            date_from=date_from if date_from is not None else start_of_month(today),
            date_to=date_to if date_to is not None else today,
            search_text=search_text or "",
        )


def matches(transaction: Any, spec: FilterSpec) -> bool:
    """Check a single transaction against every active criterion."""
    if spec.kind != KindFilter.any and _kind_value(transaction.kind) != spec.kind.value:
        return False

    category = (transaction.category or "").lower()
    if spec.category_contains and spec.category_contains.lower() not in category:
        return False

    txn_date = as_calendar_date(transaction.date)
    if txn_date < as_calendar_date(spec.date_from) or txn_date > as_calendar_date(spec.date_to):
        return False

    if spec.search_text:
        q = spec.search_text.lower()
        description = (transaction.description or "").lower()
        if q not in description and q not in category:
            return False

    return True


def apply_filters(transactions: Iterable[Any], spec: FilterSpec) -> List[Any]:
    """Return the matching transactions in their input order."""
    return [t for t in transactions if matches(t, spec)]
