"""Time-bucketed history views."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, Iterator, Optional

from ..storage.records import ScanRecord
from .age import reconstruct_timestamp, to_local
from .query import HistoryQuery, query_history

BUCKETS = ("today", "yesterday", "this_week", "older")


@dataclass
class HistoryGroups:
    """Records bucketed by day, each bucket in query order."""

    today: list[ScanRecord] = field(default_factory=list)
    yesterday: list[ScanRecord] = field(default_factory=list)
    this_week: list[ScanRecord] = field(default_factory=list)
    older: list[ScanRecord] = field(default_factory=list)

    def sections(self) -> Iterator[tuple[str, list[ScanRecord]]]:
        """Yield (bucket, records) for non-empty buckets, newest first."""
        for name in BUCKETS:
            records = getattr(self, name)
            if records:
                yield name, records

    def __len__(self) -> int:
        return sum(len(getattr(self, name)) for name in BUCKETS)


def bucket_for(ts: datetime, now: datetime) -> str:
    """Bucket name for a reconstructed timestamp."""
    now = to_local(now)
    ts = to_local(ts)
    if ts.date() == now.date():
        return "today"
    if ts.date() == (now - timedelta(days=1)).date():
        return "yesterday"
    if ts >= now - timedelta(days=7):
        return "this_week"
    return "older"


def group_records(records: Iterable[ScanRecord], now: Optional[datetime] = None) -> HistoryGroups:
    """Bucket records into today/yesterday/this week/older."""
    now = to_local(now or datetime.now())
    groups = HistoryGroups()
    for record in records:
        ts = reconstruct_timestamp(record.occurred_at, now)
        getattr(groups, bucket_for(ts, now)).append(record)
    return groups


def grouped_history(
    records: Iterable[ScanRecord],
    options: Optional[HistoryQuery] = None,
    now: Optional[datetime] = None,
) -> HistoryGroups:
    """Filter, sort and bucket records in one call."""
    now = to_local(now or datetime.now())
    return group_records(query_history(records, options, now), now)
