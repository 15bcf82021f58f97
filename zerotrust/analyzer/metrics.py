"""Detection metrics tracking for rule analysis.

Provides insight into which rules are firing and how often, so rule
weights and catalog entries can be tuned from real scan traffic.
"""

import logging
import threading
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class RuleMetrics:
    """Metrics for a single rule."""

    hits: int = 0
    last_hit: Optional[datetime] = None

    def record_hit(self) -> None:
        self.hits += 1
        self.last_hit = datetime.now()


class DetectionMetrics:
    """Thread-safe metrics collector for scan analysis.

    Tracks rule hits, recommendations and scan types.
    """

    _instance: Optional["DetectionMetrics"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "DetectionMetrics":
        """Singleton pattern for global metrics access."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        self._initialized = True
        self._lock = threading.Lock()
        self._rules: dict[str, RuleMetrics] = defaultdict(RuleMetrics)
        self._recommendations: dict[str, int] = defaultdict(int)
        self._scan_types: dict[str, int] = defaultdict(int)
        self._total_scans: int = 0
        self._started: datetime = datetime.now()

    def record_rule_hit(self, rule: str) -> None:
        """Record a rule firing."""
        with self._lock:
            self._rules[rule].record_hit()

    def record_scan(self, scan_type: str, recommendation: str) -> None:
        """Record a completed scan and its recommendation."""
        with self._lock:
            self._scan_types[scan_type] += 1
            self._recommendations[recommendation] += 1
            self._total_scans += 1

    def get_summary(self) -> dict:
        """Get a summary of all metrics."""
        with self._lock:
            uptime = datetime.now() - self._started
            return {
                "uptime_seconds": int(uptime.total_seconds()),
                "total_scans": self._total_scans,
                "recommendations": dict(self._recommendations),
                "scan_types": dict(self._scan_types),
                "top_rules": self._get_top_rules(10),
            }

    def _get_top_rules(self, n: int) -> list[dict]:
        """Get top N rules by hit count."""
        sorted_rules = sorted(
            self._rules.items(),
            key=lambda x: x[1].hits,
            reverse=True,
        )[:n]
        return [
            {
                "rule": name[:50],
                "hits": m.hits,
                "last_hit": m.last_hit.isoformat() if m.last_hit else None,
            }
            for name, m in sorted_rules
        ]

    def log_summary(self) -> None:
        """Log a one-line summary at INFO level."""
        summary = self.get_summary()
        logger.info(
            "Scans: %d total, recommendations=%s, types=%s",
            summary["total_scans"],
            summary["recommendations"],
            summary["scan_types"],
        )

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        with self._lock:
            self._rules.clear()
            self._recommendations.clear()
            self._scan_types.clear()
            self._total_scans = 0
            self._started = datetime.now()


# Global instance
metrics = DetectionMetrics()
