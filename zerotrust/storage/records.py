"""Scan record model."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional, Union

# Either an absolute timestamp or a relative-age descriptor such as "5 min ago".
OccurredAt = Union[datetime, str]
RecordId = Union[int, str]


def _plain(value) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class ScanRecord:
    """Outcome of one past scan, as shown in the history list.

    ``status`` and ``threat_level`` are stored as plain strings so that
    legacy rows carrying unknown values still render and sort.
    """

    subject: str
    type: str
    threat_level: str
    status: str
    occurred_at: OccurredAt
    id: Optional[RecordId] = None

    def __post_init__(self):
        object.__setattr__(self, "type", _plain(self.type))
        object.__setattr__(self, "threat_level", _plain(self.threat_level))
        object.__setattr__(self, "status", _plain(self.status))

    def with_id(self, record_id: RecordId) -> "ScanRecord":
        return replace(self, id=record_id)

    @property
    def raw_time(self) -> str:
        """The stored time value as text (ISO timestamp or age descriptor)."""
        if isinstance(self.occurred_at, datetime):
            return self.occurred_at.isoformat()
        return self.occurred_at

    def to_dict(self) -> dict:
        """Convert to dictionary for export."""
        return {
            "id": self.id,
            "subject": self.subject,
            "type": self.type,
            "threat_level": self.threat_level,
            "status": self.status,
            "time": self.raw_time,
        }
