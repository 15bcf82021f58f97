"""Configuration management for ZeroTrust scans."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .analyzer.catalog import DEFAULT_CATALOG, ThreatIndicatorCatalog

logger = logging.getLogger(__name__)

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """Application configuration loaded from environment."""

    config_dir: Path = field(default_factory=lambda: Path("./config"))
    log_level: str = "INFO"

    # Seed the history with demo scans on startup
    history_sample_data: bool = False

    # Artificial "scanning" delay for interactive hosts (seconds)
    scan_delay_seconds: float = 0.0

    # Indicator catalog (override via config/heuristics.yaml)
    catalog: ThreatIndicatorCatalog = field(default_factory=lambda: DEFAULT_CATALOG)

    def __post_init__(self):
        self.config_dir = Path(self.config_dir)
        self.log_level = (self.log_level or "INFO").strip().upper()


def _coerce_string_list(raw, name: str):
    """Return a list of non-empty strings, or None if ``raw`` is unusable."""
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple, set)):
        logger.warning("Ignoring heuristics entry %s: expected a list", name)
        return None
    items = [str(item).strip() for item in raw if item is not None and str(item).strip()]
    if not items:
        logger.warning("Ignoring heuristics entry %s: list is empty", name)
        return None
    return items


def _load_heuristics(config_dir: Path) -> dict:
    """Load catalog overrides from config/heuristics.yaml (optional)."""
    path = Path(config_dir or ".") / "heuristics.yaml"
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to parse heuristics.yaml: %s", exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring heuristics.yaml: top level must be a mapping")
        return {}

    url_cfg = data.get("url") or {}
    content_cfg = data.get("content") or {}
    if not isinstance(url_cfg, dict):
        url_cfg = {}
    if not isinstance(content_cfg, dict):
        content_cfg = {}

    return {
        "suspicious_domains": _coerce_string_list(url_cfg.get("suspicious_domains"), "url.suspicious_domains"),
        "typosquat_tokens": _coerce_string_list(url_cfg.get("typosquat_tokens"), "url.typosquat_tokens"),
        "phishing_phrases": _coerce_string_list(content_cfg.get("phishing_phrases"), "content.phishing_phrases"),
    }


def build_catalog(config_dir: Path) -> ThreatIndicatorCatalog:
    """Default catalog with any heuristics.yaml overrides applied."""
    overrides = _load_heuristics(config_dir)
    if not any(overrides.values()):
        return DEFAULT_CATALOG
    logger.info(
        "Loaded catalog overrides from %s: %s",
        config_dir,
        ", ".join(name for name, value in overrides.items() if value),
    )
    return DEFAULT_CATALOG.with_overrides(**overrides)


def _parse_float(value: str, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Invalid float value %r; using %s", value, default)
        return default


def load_config() -> Config:
    """Load configuration from environment variables."""
    load_dotenv()

    config_dir = Path(os.getenv("CONFIG_DIR", "./config"))

    return Config(
        config_dir=config_dir,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        history_sample_data=os.getenv("HISTORY_SAMPLE_DATA", "false").lower() == "true",
        scan_delay_seconds=_parse_float(os.getenv("SCAN_DELAY_SECONDS", "0"), 0.0),
        catalog=build_catalog(config_dir),
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration and return list of error messages."""
    errors: list[str] = []
    if config.log_level not in LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}")
    if config.scan_delay_seconds < 0:
        errors.append("SCAN_DELAY_SECONDS must not be negative")
    if not config.catalog.phishing_phrases:
        errors.append("Catalog has no phishing phrases")
    if not config.catalog.suspicious_domain_substrings:
        # Scans still run, the impersonation rule just never fires.
        logger.info("Catalog has no suspicious domains; impersonation rule disabled")
    return errors
