"""Analyzer modules for ZeroTrust scans."""

from .catalog import DEFAULT_CATALOG, ThreatIndicatorCatalog
from .classifier import BLOCK_THRESHOLD, WARN_THRESHOLD, Classification, classify
from .detector_content import ContentRiskAnalyzer, analyze_content
from .detector_url import UrlRiskAnalyzer, analyze_url
from .engine import InvalidInputError, ScanEngine, ScanError, ScanOutcome
from .rules import AnalysisKind, AnalysisResult, ScanRule

__all__ = [
    "DEFAULT_CATALOG",
    "ThreatIndicatorCatalog",
    "BLOCK_THRESHOLD",
    "WARN_THRESHOLD",
    "Classification",
    "classify",
    "ContentRiskAnalyzer",
    "analyze_content",
    "UrlRiskAnalyzer",
    "analyze_url",
    "InvalidInputError",
    "ScanEngine",
    "ScanError",
    "ScanOutcome",
    "AnalysisKind",
    "AnalysisResult",
    "ScanRule",
]
