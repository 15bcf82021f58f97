"""Storage modules for ZeroTrust scan history."""

from .enums import Recommendation, ScanStatus, ScanType, ThreatLevel
from .history import SAMPLE_SCANS, ScanHistory
from .records import ScanRecord

__all__ = [
    "Recommendation",
    "ScanStatus",
    "ScanType",
    "ThreatLevel",
    "SAMPLE_SCANS",
    "ScanHistory",
    "ScanRecord",
]
