"""Aggregate statistics over scan history."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from ..storage.enums import ScanStatus
from ..storage.records import ScanRecord
from .query import ALL_STATUSES


@dataclass
class HistoryStats:
    """Counts shown in the history summary and filter chips."""

    total: int = 0
    by_status: dict[str, int] = field(default_factory=dict)
    by_type: dict[str, int] = field(default_factory=dict)
    by_threat: dict[str, int] = field(default_factory=dict)

    @property
    def blocked(self) -> int:
        return self.by_status.get(ScanStatus.BLOCKED.value, 0)

    @property
    def flagged(self) -> int:
        return self.by_status.get(ScanStatus.FLAGGED.value, 0)

    @property
    def safe(self) -> int:
        return self.by_status.get(ScanStatus.SAFE.value, 0)

    def filter_counts(self) -> dict[str, int]:
        """Counts for the all/blocked/flagged/safe filters."""
        return {
            ALL_STATUSES: self.total,
            ScanStatus.BLOCKED.value: self.blocked,
            ScanStatus.FLAGGED.value: self.flagged,
            ScanStatus.SAFE.value: self.safe,
        }

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "blocked": self.blocked,
            "flagged": self.flagged,
            "safe": self.safe,
            "by_type": dict(self.by_type),
            "by_threat": dict(self.by_threat),
        }


def summarize(records: Iterable[ScanRecord]) -> HistoryStats:
    """Return stats for summary counts/filters."""
    records = list(records)
    return HistoryStats(
        total=len(records),
        by_status=dict(Counter(r.status for r in records)),
        by_type=dict(Counter(r.type for r in records)),
        by_threat=dict(Counter(r.threat_level for r in records)),
    )
