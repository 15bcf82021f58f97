"""Shared storage enums."""

from __future__ import annotations

from enum import Enum


class ScanType(str, Enum):
    """Declared type of a scan request."""

    URL = "url"
    EMAIL = "email"
    SMS = "sms"


class ThreatLevel(str, Enum):
    """Coarse threat level shown next to a scan."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ScanStatus(str, Enum):
    """Status of a scan in the history list."""

    SAFE = "safe"  # Nothing actionable found
    FLAGGED = "flagged"  # User was warned
    BLOCKED = "blocked"  # Treated as malicious


class Recommendation(str, Enum):
    """Action recommended to the user after a scan."""

    SAFE = "safe"
    WARN = "warn"
    BLOCK = "block"
