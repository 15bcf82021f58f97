"""Scan engine: validates input, runs the analyzer, records the outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Union

from ..storage.enums import Recommendation, ScanType, ThreatLevel
from ..storage.history import ScanHistory
from ..storage.records import ScanRecord
from .catalog import DEFAULT_CATALOG, ThreatIndicatorCatalog
from .classifier import Classification, classify
from .detector_content import ContentRiskAnalyzer
from .detector_url import UrlRiskAnalyzer
from .metrics import metrics
from .rules import AnalysisResult

logger = logging.getLogger(__name__)


class ScanError(Exception):
    """Base exception for scan errors."""

    pass


class InvalidInputError(ScanError):
    """Scan request with no usable input."""

    pass


@dataclass(frozen=True)
class ScanOutcome:
    """Everything the host needs to render one finished scan."""

    input: str
    scan_type: ScanType
    analysis: AnalysisResult
    recommendation: Recommendation
    threat_level: ThreatLevel
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def risk_score(self) -> int:
        return self.analysis.risk_score

    @property
    def threat_indicators(self) -> tuple[str, ...]:
        return self.analysis.threat_indicators


def parse_scan_type(value: Union[str, ScanType]) -> ScanType:
    """Coerce a declared type, rejecting anything unknown."""
    if isinstance(value, ScanType):
        return value
    try:
        return ScanType(str(value or "").strip().lower())
    except ValueError:
        raise InvalidInputError(f"Unknown scan type: {value!r}") from None


class ScanEngine:
    """Runs scans against one catalog and records them into a history store."""

    def __init__(
        self,
        catalog: ThreatIndicatorCatalog = DEFAULT_CATALOG,
        history: Optional[ScanHistory] = None,
    ):
        self.catalog = catalog
        self.history = history if history is not None else ScanHistory()
        self.url_analyzer = UrlRiskAnalyzer(catalog)
        self.content_analyzer = ContentRiskAnalyzer(catalog)

    def scan(self, raw_text: str, declared_type: Union[str, ScanType] = ScanType.URL) -> ScanOutcome:
        """Analyze one input and classify the result.

        Raises InvalidInputError for blank input or an unknown type.
        """
        if not (raw_text or "").strip():
            raise InvalidInputError("Please enter a URL or text to scan")
        scan_type = parse_scan_type(declared_type)

        if scan_type == ScanType.URL:
            analysis = self.url_analyzer.analyze(raw_text)
        else:
            analysis = self.content_analyzer.analyze(raw_text)

        classification = classify(analysis.risk_score)

        for rule in analysis.matched_rules:
            metrics.record_rule_hit(rule)
        metrics.record_scan(scan_type.value, classification.recommendation.value)

        logger.info(
            "Scanned %s input: score=%d recommendation=%s",
            scan_type.value,
            analysis.risk_score,
            classification.recommendation.value,
        )
        if analysis.threat_indicators:
            logger.debug("Indicators: %s", "; ".join(analysis.threat_indicators))

        return ScanOutcome(
            input=raw_text,
            scan_type=scan_type,
            analysis=analysis,
            recommendation=classification.recommendation,
            threat_level=classification.threat_level,
        )

    def record(self, outcome: ScanOutcome) -> ScanRecord:
        """Persist an outcome into the history store."""
        classification = Classification(outcome.recommendation, outcome.threat_level)
        record = ScanRecord(
            subject=outcome.input,
            type=outcome.scan_type,
            threat_level=classification.threat_level,
            status=classification.status,
            occurred_at=outcome.timestamp,
        )
        return self.history.add(record)

    def scan_and_record(
        self, raw_text: str, declared_type: Union[str, ScanType] = ScanType.URL
    ) -> tuple[ScanOutcome, ScanRecord]:
        outcome = self.scan(raw_text, declared_type)
        return outcome, self.record(outcome)
