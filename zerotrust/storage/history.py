"""In-memory scan history store."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from .enums import ScanStatus, ScanType, ThreatLevel
from .records import RecordId, ScanRecord

logger = logging.getLogger(__name__)


SAMPLE_SCANS: tuple[ScanRecord, ...] = (
    ScanRecord("paypal-security.com", ScanType.URL, ThreatLevel.HIGH, ScanStatus.BLOCKED, "2 min ago"),
    ScanRecord("gmail message", ScanType.EMAIL, ThreatLevel.MEDIUM, ScanStatus.FLAGGED, "5 min ago"),
    ScanRecord("amazon-login.net", ScanType.URL, ThreatLevel.HIGH, ScanStatus.BLOCKED, "10 min ago"),
    ScanRecord("SMS verification", ScanType.SMS, ThreatLevel.LOW, ScanStatus.SAFE, "15 min ago"),
)


class ScanHistory:
    """Ordered collection of past scan records.

    Records are kept in insertion order. Ids come from a counter that is
    never rewound, so an id is not reused after ``remove`` or ``clear``.
    Not thread-safe: hosts that share a store across threads must guard
    ``add``, ``remove`` and ``clear`` themselves.
    """

    def __init__(self, records: Optional[list[ScanRecord]] = None):
        self._records: list[ScanRecord] = []
        self._next_id = 1
        for record in records or []:
            self.add(record)

    @classmethod
    def with_samples(cls) -> "ScanHistory":
        """Create a store seeded with the demo scans."""
        return cls(list(SAMPLE_SCANS))

    def add(self, record: ScanRecord) -> ScanRecord:
        """Append a record, assigning an id when it has none or its id is taken."""
        if record.id is None or self.get(record.id) is not None:
            record = record.with_id(self._next_id)
        if isinstance(record.id, int):
            self._next_id = max(self._next_id, record.id + 1)
        self._records.append(record)
        logger.debug("Added scan record %s (%s)", record.id, record.status)
        return record

    def remove(self, record_id: RecordId) -> bool:
        """Delete the record with this id. Missing ids are a no-op."""
        for index, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[index]
                logger.debug("Removed scan record %s", record_id)
                return True
        logger.debug("Scan record %s not found; nothing removed", record_id)
        return False

    def clear(self) -> int:
        """Drop every record and return how many were removed."""
        count = len(self._records)
        self._records = []
        logger.info("Cleared scan history (%d records)", count)
        return count

    def list(self) -> tuple[ScanRecord, ...]:
        """Snapshot of all records in insertion order."""
        return tuple(self._records)

    def get(self, record_id: RecordId) -> Optional[ScanRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ScanRecord]:
        return iter(self.list())
