"""Threat-level ranking helpers for comparisons."""

from __future__ import annotations

THREAT_RANK = {
    "high": 3,
    "medium": 2,
    "low": 1,
}


def threat_rank(level: str | None) -> int:
    """Return the severity rank of a threat level; unknown levels rank 0."""
    return THREAT_RANK.get(level or "", 0)

