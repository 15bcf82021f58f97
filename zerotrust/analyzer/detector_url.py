"""URL risk analysis."""

from __future__ import annotations

import re

from .catalog import DEFAULT_CATALOG, ThreatIndicatorCatalog
from .rules import AnalysisKind, AnalysisResult, ScanRule, evaluate_rules

SCHEME_RE = re.compile(r"^https?://")
DIGIT_RE = re.compile(r"\d")

# More dots than this suggests a deep subdomain chain
MAX_DOTS = 3


def build_url_rules(catalog: ThreatIndicatorCatalog) -> tuple[ScanRule, ...]:
    """Build the URL rule table for a catalog, in evaluation order."""
    domains = catalog.suspicious_domain_substrings
    typos = catalog.typosquat_tokens

    return (
        ScanRule(
            name="domain_impersonation",
            weight=40,
            indicator="Domain impersonation detected",
            predicate=lambda url: any(d in url.lower() for d in domains),
        ),
        ScanRule(
            name="typosquatting",
            weight=30,
            indicator="Typosquatting attempt",
            predicate=lambda url: any(t in url for t in typos),
        ),
        ScanRule(
            name="subdomain_structure",
            weight=20,
            indicator="Suspicious subdomain structure",
            predicate=lambda url: url.count(".") > MAX_DOTS,
        ),
        ScanRule(
            name="domain_digits",
            weight=10,
            indicator="Unusual domain pattern",
            predicate=lambda url: DIGIT_RE.search(SCHEME_RE.sub("", url, count=1)) is not None,
        ),
    )


class UrlRiskAnalyzer:
    """Scores URLs against structural and lexical indicators.

    Any string is accepted; malformed URLs are scored like any other text.
    """

    def __init__(self, catalog: ThreatIndicatorCatalog = DEFAULT_CATALOG):
        self.catalog = catalog
        self.rules = build_url_rules(catalog)

    def analyze(self, url: str) -> AnalysisResult:
        return evaluate_rules(self.rules, url or "", AnalysisKind.URL)


_default_analyzer = UrlRiskAnalyzer()


def analyze_url(url: str, catalog: ThreatIndicatorCatalog | None = None) -> AnalysisResult:
    """Score a URL with the default catalog, or with ``catalog`` if given."""
    if catalog is None or catalog is DEFAULT_CATALOG:
        return _default_analyzer.analyze(url)
    return UrlRiskAnalyzer(catalog).analyze(url)
