"""Filtering and sorting of scan history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, Optional

from ..storage.rankings import threat_rank
from ..storage.records import ScanRecord
from .age import age_sort_key

ALL_STATUSES = "all"


class SortKey(str, Enum):
    """Orderings offered by the history list."""

    DATE = "date"
    NAME = "name"
    STATUS = "status"
    THREAT = "threat"

    @classmethod
    def from_string(cls, value: str | None) -> "SortKey":
        """Convert a string to a sort key, defaulting to DATE."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.DATE


@dataclass(frozen=True)
class HistoryQuery:
    """Options for one history view."""

    status_filter: str = ALL_STATUSES
    text_filter: str = ""
    sort_key: str = SortKey.DATE.value


def _matches_status(record: ScanRecord, status_filter: str) -> bool:
    if not status_filter or status_filter == ALL_STATUSES:
        return True
    return record.status == status_filter


def _matches_text(record: ScanRecord, needle: str) -> bool:
    return needle in record.subject.lower() or needle in record.type.lower()


def filter_records(records: Iterable[ScanRecord], status_filter: str = ALL_STATUSES, text_filter: str = "") -> list[ScanRecord]:
    """Keep records matching both the status and the search text."""
    status_filter = str(getattr(status_filter, "value", status_filter) or ALL_STATUSES)
    needle = (text_filter or "").lower()

    filtered = [r for r in records if _matches_status(r, status_filter)]
    if needle.strip():
        filtered = [r for r in filtered if _matches_text(r, needle)]
    return filtered


def _sort_key_func(sort_key: SortKey, now: Optional[datetime]) -> tuple[Callable[[ScanRecord], object], bool]:
    if sort_key == SortKey.NAME:
        return (lambda r: (r.subject.casefold(), r.subject)), False
    if sort_key == SortKey.STATUS:
        return (lambda r: r.status), False
    if sort_key == SortKey.THREAT:
        return (lambda r: threat_rank(r.threat_level)), True
    return (lambda r: age_sort_key(r.occurred_at, now)), False


def sort_records(records: Iterable[ScanRecord], sort_key: str = SortKey.DATE.value, now: Optional[datetime] = None) -> list[ScanRecord]:
    """Stable sort; unknown keys sort by date."""
    now = now or datetime.now()
    key, reverse = _sort_key_func(SortKey.from_string(getattr(sort_key, "value", sort_key)), now)
    return sorted(records, key=key, reverse=reverse)


def query_history(
    records: Iterable[ScanRecord],
    options: Optional[HistoryQuery] = None,
    now: Optional[datetime] = None,
) -> list[ScanRecord]:
    """Filter then sort records. Pure: the input is never modified."""
    options = options or HistoryQuery()
    filtered = filter_records(records, options.status_filter, options.text_filter)
    return sort_records(filtered, options.sort_key, now)
