"""Global pytest configuration."""

from __future__ import annotations

import os
from datetime import datetime

import pytest

from zerotrust.analyzer.metrics import metrics
from zerotrust.storage import ScanHistory, ScanRecord

# Keep a developer's .env from changing catalog/config during tests.
os.environ.setdefault("HISTORY_SAMPLE_DATA", "false")


@pytest.fixture
def now() -> datetime:
    """A fixed mid-day 'now' so day buckets are deterministic."""
    return datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def sample_history() -> ScanHistory:
    return ScanHistory.with_samples()


@pytest.fixture
def mixed_records() -> list[ScanRecord]:
    """Records spanning every bucket and status."""
    return [
        ScanRecord("paypal-security.com", "url", "high", "blocked", "2 min ago", id=1),
        ScanRecord("gmail message", "email", "medium", "flagged", "3 hours ago", id=2),
        ScanRecord("amazon-login.net", "url", "high", "blocked", "1 day ago", id=3),
        ScanRecord("SMS verification", "sms", "low", "safe", "4 days ago", id=4),
        ScanRecord("bank notice", "email", "medium", "flagged", "2 month ago", id=5),
        ScanRecord("weird entry", "sms", "unknown", "safe", "sometime", id=6),
    ]


@pytest.fixture(autouse=True)
def reset_metrics():
    metrics.reset()
    yield
    metrics.reset()
