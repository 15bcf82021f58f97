"""Free-text (email/SMS) risk analysis."""

from __future__ import annotations

import re

from .catalog import DEFAULT_CATALOG, ThreatIndicatorCatalog
from .rules import AnalysisKind, AnalysisResult, ScanRule, evaluate_rules

CALL_TO_ACTION_RE = re.compile(r"click.*here", re.I)
MONEY_RE = re.compile(r"\$\d+")

PHRASE_WEIGHT = 15


def _phrase_rule(phrase: str) -> ScanRule:
    needle = phrase.lower()
    return ScanRule(
        name=f"phrase:{needle}",
        weight=PHRASE_WEIGHT,
        indicator=f'Phishing phrase: "{phrase}"',
        predicate=lambda text: needle in text.lower(),
    )


def build_content_rules(catalog: ThreatIndicatorCatalog) -> tuple[ScanRule, ...]:
    """One rule per catalog phrase, then the call-to-action and money rules."""
    rules = [_phrase_rule(phrase) for phrase in catalog.phishing_phrases]
    rules.append(
        ScanRule(
            name="call_to_action",
            weight=10,
            indicator="Suspicious call-to-action",
            predicate=lambda text: CALL_TO_ACTION_RE.search(text) is not None,
        )
    )
    rules.append(
        ScanRule(
            name="money",
            weight=10,
            indicator="Money-related content",
            predicate=lambda text: MONEY_RE.search(text) is not None,
        )
    )
    return tuple(rules)


class ContentRiskAnalyzer:
    """Scores message text against phrase and pattern indicators."""

    def __init__(self, catalog: ThreatIndicatorCatalog = DEFAULT_CATALOG):
        self.catalog = catalog
        self.rules = build_content_rules(catalog)

    def analyze(self, text: str) -> AnalysisResult:
        return evaluate_rules(self.rules, text or "", AnalysisKind.CONTENT)


_default_analyzer = ContentRiskAnalyzer()


def analyze_content(text: str, catalog: ThreatIndicatorCatalog | None = None) -> AnalysisResult:
    """Score message text with the default catalog, or with ``catalog`` if given."""
    if catalog is None or catalog is DEFAULT_CATALOG:
        return _default_analyzer.analyze(text)
    return ContentRiskAnalyzer(catalog).analyze(text)
