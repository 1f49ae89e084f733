"""Ledger aggregation helpers shared by the forecast and health engines"""

from datetime import date
from typing import Callable, Iterable, List, Literal, Optional

from legalflow_finance.domain.exceptions import ValidationError
from legalflow_finance.domain.models import EntryKind, EntryStatus, LedgerEntry
from legalflow_finance.utils.date_utils import ensure_date

DateField = Literal["due_date", "paid_date"]
Predicate = Callable[[LedgerEntry], bool]

DATE_FIELDS = ("due_date", "paid_date")


def matching(
    kind: Optional[EntryKind] = None,
    status: Optional[EntryStatus] = None,
    categories: Optional[Iterable[str]] = None,
    exclude_categories: Optional[Iterable[str]] = None,
) -> Predicate:
    """
    Build a predicate over the common ledger filters.

    Unset arguments do not filter. Category matching is exact and case sensitive.
    """
    included = frozenset(categories) if categories is not None else None
    excluded = frozenset(exclude_categories) if exclude_categories is not None else frozenset()

    def predicate(entry: LedgerEntry) -> bool:
        if kind is not None and entry.kind != kind:
            return False
        if status is not None and entry.status != status:
            return False
        if included is not None and entry.category not in included:
            return False
        return entry.category not in excluded

    return predicate


def sum_by(entries: Iterable[LedgerEntry], predicate: Optional[Predicate] = None) -> float:
    """Sum amounts of entries accepted by predicate (all entries when None)"""
    return sum((e.amount for e in entries if predicate is None or predicate(e)), 0.0)


def count_by(entries: Iterable[LedgerEntry], predicate: Optional[Predicate] = None) -> int:
    return sum(1 for e in entries if predicate is None or predicate(e))


def entry_date(entry: LedgerEntry, date_field: DateField) -> Optional[date]:
    """
    Read the selected date field of an entry.

    Returns None when the field is unset (e.g. paid_date of a pending entry).

    Raises:
        ValidationError: Unknown field name, or the field holds a non-date value
    """
    if date_field not in DATE_FIELDS:
        raise ValidationError(f"date_field must be one of {DATE_FIELDS}, got {date_field!r}")

    value = getattr(entry, date_field)
    if value is None:
        return None
    return ensure_date(value, date_field)


def entries_in_window(
    entries: Iterable[LedgerEntry],
    start: date,
    end: date,
    date_field: DateField,
) -> List[LedgerEntry]:
    """
    Filter entries whose date_field falls in [start, end] (both inclusive).

    The caller always names the field: revenue recognition uses paid_date,
    receivables use due_date. Entries with the field unset are skipped.

    Raises:
        ValidationError: Unknown date_field, bounds are not dates, start is
            after end, or an entry carries a malformed date
    """
    if date_field not in DATE_FIELDS:
        raise ValidationError(f"date_field must be one of {DATE_FIELDS}, got {date_field!r}")
    start = ensure_date(start, "start")
    end = ensure_date(end, "end")
    if start > end:
        raise ValidationError(f"Window start {start} is after end {end}")

    selected = []
    for entry in entries:
        day = entry_date(entry, date_field)
        if day is not None and start <= day <= end:
            selected.append(entry)
    return selected
