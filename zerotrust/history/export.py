"""Flat export formats for sharing scan history.

Export is one-way: these produce text for the host to share and there
is no matching import path.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Iterable, Optional

from ..storage.records import ScanRecord
from .age import display_time

CSV_HEADER = "ID,URL,Type,Threat Level,Status,Time"
DEFAULT_TEXT_TITLE = "ZeroTrust IoT Scan History"

_CSV_SPECIAL = (",", '"', "\n", "\r")


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _csv_cell(value) -> str:
    text = "" if value is None else str(value)
    if any(ch in text for ch in _CSV_SPECIAL):
        return _quote(text)
    return text


def export_csv(records: Iterable[ScanRecord], now: Optional[datetime] = None) -> str:
    """CSV table; the subject column is always quoted."""
    lines = [CSV_HEADER]
    for record in records:
        lines.append(
            ",".join(
                [
                    _csv_cell(record.id),
                    _quote(record.subject),
                    _csv_cell(record.type),
                    _csv_cell(record.threat_level),
                    _csv_cell(record.status),
                    _csv_cell(display_time(record.occurred_at, now)),
                ]
            )
        )
    return "\n".join(lines)


def export_json(records: Iterable[ScanRecord]) -> str:
    """Pretty-printed dump of the raw record array."""
    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)


def format_record_line(record: ScanRecord, now: Optional[datetime] = None) -> str:
    return (
        f"{record.subject} - {record.type} scan - {record.threat_level} risk"
        f" - {record.status} - {display_time(record.occurred_at, now)}"
    )


def export_text(
    records: Iterable[ScanRecord],
    now: Optional[datetime] = None,
    title: Optional[str] = None,
) -> str:
    """One line per record, separated by blank lines, with an optional title."""
    body = "\n\n".join(format_record_line(record, now) for record in records)
    if title:
        return f"{title}\n\n{body}"
    return body
