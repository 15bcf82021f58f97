"""Threat indicator catalog used by the analyzers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

DEFAULT_SUSPICIOUS_DOMAINS: tuple[str, ...] = (
    "paypal-security.com",
    "amazon-login.net",
    "microsoft-verify.org",
    "bank-security.co",
    "google-signin.net",
)

# Common misspellings of brand domains
DEFAULT_TYPOSQUAT_TOKENS: tuple[str, ...] = (
    "payapl",
    "gooogle",
    "mircosoft",
)

DEFAULT_PHISHING_PHRASES: tuple[str, ...] = (
    "Urgent action required",
    "Click here immediately",
    "Verify your account now",
    "Suspended account",
    "Limited time offer",
    "Congratulations! You won",
    "Tax refund pending",
    "Security alert",
)


def _clean(items: Iterable[str]) -> list[str]:
    cleaned = []
    for item in items:
        text = str(item or "").strip()
        if text and text not in cleaned:
            cleaned.append(text)
    return cleaned


@dataclass(frozen=True)
class ThreatIndicatorCatalog:
    """Known-bad domain fragments, typo tokens and phishing phrases.

    Built once and shared read-only. Use ``with_overrides`` to derive a
    variant (e.g. from config/heuristics.yaml or in tests).
    """

    suspicious_domain_substrings: frozenset[str] = field(
        default_factory=lambda: frozenset(DEFAULT_SUSPICIOUS_DOMAINS)
    )
    typosquat_tokens: frozenset[str] = field(
        default_factory=lambda: frozenset(DEFAULT_TYPOSQUAT_TOKENS)
    )
    phishing_phrases: tuple[str, ...] = DEFAULT_PHISHING_PHRASES

    def __post_init__(self):
        # Domain matching is done on the lower-cased url.
        object.__setattr__(
            self,
            "suspicious_domain_substrings",
            frozenset(d.lower() for d in _clean(self.suspicious_domain_substrings)),
        )
        object.__setattr__(self, "typosquat_tokens", frozenset(_clean(self.typosquat_tokens)))
        object.__setattr__(self, "phishing_phrases", tuple(_clean(self.phishing_phrases)))

    def with_overrides(
        self,
        suspicious_domains: Optional[Iterable[str]] = None,
        typosquat_tokens: Optional[Iterable[str]] = None,
        phishing_phrases: Optional[Iterable[str]] = None,
    ) -> "ThreatIndicatorCatalog":
        """Return a copy with the given lists replaced."""
        changes: dict = {}
        if suspicious_domains is not None:
            changes["suspicious_domain_substrings"] = frozenset(suspicious_domains)
        if typosquat_tokens is not None:
            changes["typosquat_tokens"] = frozenset(typosquat_tokens)
        if phishing_phrases is not None:
            changes["phishing_phrases"] = tuple(phishing_phrases)
        return replace(self, **changes)


DEFAULT_CATALOG = ThreatIndicatorCatalog()
