"""Rule-based building blocks for risk scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable


class AnalysisKind(str, Enum):
    """Which analyzer produced a result."""

    URL = "url"
    CONTENT = "content"


@dataclass(frozen=True)
class ScanRule:
    """A single weighted heuristic.

    ``predicate`` receives the raw input text and returns True when the
    rule fires; a firing rule adds ``weight`` and emits ``indicator``.
    """

    name: str
    weight: int
    indicator: str
    predicate: Callable[[str], bool]

    def matches(self, text: str) -> bool:
        return bool(self.predicate(text))


@dataclass(frozen=True)
class AnalysisResult:
    """Score and triggered indicators for one input."""

    kind: AnalysisKind
    risk_score: int = 0
    threat_indicators: tuple[str, ...] = ()
    matched_rules: tuple[str, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not self.threat_indicators


def evaluate_rules(rules: Iterable[ScanRule], text: str, kind: AnalysisKind) -> AnalysisResult:
    """Apply every rule in order and sum the weights of those that fire."""
    score = 0
    indicators: list[str] = []
    matched: list[str] = []

    for rule in rules:
        if rule.matches(text):
            score += rule.weight
            indicators.append(rule.indicator)
            matched.append(rule.name)

    return AnalysisResult(
        kind=kind,
        risk_score=score,
        threat_indicators=tuple(indicators),
        matched_rules=tuple(matched),
    )
