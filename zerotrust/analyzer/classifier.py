"""Map risk scores to recommendations."""

from __future__ import annotations

from dataclasses import dataclass

from ..storage.enums import Recommendation, ScanStatus, ThreatLevel

BLOCK_THRESHOLD = 50
WARN_THRESHOLD = 25

_STATUS_FOR = {
    Recommendation.BLOCK: ScanStatus.BLOCKED,
    Recommendation.WARN: ScanStatus.FLAGGED,
    Recommendation.SAFE: ScanStatus.SAFE,
}


@dataclass(frozen=True)
class Classification:
    """Recommendation and threat level derived from one score."""

    recommendation: Recommendation
    threat_level: ThreatLevel

    @property
    def status(self) -> ScanStatus:
        """History status matching the recommendation."""
        return _STATUS_FOR[self.recommendation]


def classify(risk_score: int) -> Classification:
    """Classify a score; lower bounds are inclusive."""
    if risk_score >= BLOCK_THRESHOLD:
        return Classification(Recommendation.BLOCK, ThreatLevel.HIGH)
    if risk_score >= WARN_THRESHOLD:
        return Classification(Recommendation.WARN, ThreatLevel.MEDIUM)
    return Classification(Recommendation.SAFE, ThreatLevel.LOW)
