"""Relative-age parsing for scan timestamps.

Legacy history rows carry descriptors such as "5 min ago" instead of
timestamps. These helpers turn them back into approximate ages. Unknown
descriptors never raise: sorting treats them as very old and bucketing
treats them as "now".
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Optional, Union

# Sort key for descriptors that cannot be parsed (sorts last).
UNKNOWN_AGE_MINUTES = 999999

MONTH_DAYS = 30

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(value: str, default: int) -> int:
    """Parse the integer prefix of ``value`` ("5 min ago" -> 5)."""
    match = _LEADING_INT_RE.match(value)
    if not match:
        return default
    number = int(match.group(1))
    # A literal zero also falls back to the default.
    return number or default


def _is_minutes(value: str) -> bool:
    return "min ago" in value or "mins ago" in value


def _is_hours(value: str) -> bool:
    return "hour ago" in value or "hours ago" in value


def to_local(ts: datetime) -> datetime:
    """Return a naive local-time datetime for comparisons."""
    if ts.tzinfo is not None:
        return ts.astimezone().replace(tzinfo=None)
    return ts


def age_in_minutes(value: Union[datetime, str, None], now: Optional[datetime] = None) -> int:
    """Approximate age in minutes, used for date sorting."""
    if isinstance(value, datetime):
        now = to_local(now or datetime.now())
        return int((now - to_local(value)).total_seconds() // 60)

    text = value or ""
    if _is_minutes(text):
        return _leading_int(text, 0)
    if _is_hours(text):
        return _leading_int(text, 0) * 60
    return UNKNOWN_AGE_MINUTES


def age_sort_key(value: Union[datetime, str, None], now: Optional[datetime] = None) -> tuple[bool, int]:
    """Date sort key: known ages ascending, unparseable descriptors after all of them."""
    text = "" if isinstance(value, datetime) else value or ""
    unknown = not isinstance(value, datetime) and not (_is_minutes(text) or _is_hours(text))
    return unknown, age_in_minutes(value, now)


def reconstruct_timestamp(value: Union[datetime, str, None], now: Optional[datetime] = None) -> datetime:
    """Rebuild an absolute local timestamp from a record's time value."""
    now = to_local(now or datetime.now())
    if isinstance(value, datetime):
        return to_local(value)

    text = value or ""
    if _is_minutes(text):
        return now - timedelta(minutes=_leading_int(text, 0))
    if _is_hours(text):
        return now - timedelta(hours=_leading_int(text, 0))
    if "day ago" in text:
        return now - timedelta(days=_leading_int(text, 1))
    if "days ago" in text:
        return now - timedelta(days=_leading_int(text, 3))
    if "month ago" in text or "months ago" in text:
        return now - timedelta(days=_leading_int(text, 1) * MONTH_DAYS)
    return now


def format_age(ts: datetime, now: Optional[datetime] = None) -> str:
    """Render a timestamp as a descriptor the parsers above understand."""
    now = to_local(now or datetime.now())
    minutes = max(0, int((now - to_local(ts)).total_seconds() // 60))

    if minutes < 60:
        return f"{minutes} min ago"
    hours = minutes // 60
    if hours < 24:
        return "1 hour ago" if hours == 1 else f"{hours} hours ago"
    days = hours // 24
    if days < MONTH_DAYS:
        return "1 day ago" if days == 1 else f"{days} days ago"
    months = days // MONTH_DAYS
    return "1 month ago" if months == 1 else f"{months} months ago"


def display_time(value: Union[datetime, str, None], now: Optional[datetime] = None) -> str:
    """Time column text for a record: descriptors pass through unchanged."""
    if isinstance(value, datetime):
        return format_age(value, now)
    return value or ""
