"""Conversion between absolute timestamps and date-only strings."""

import re
from datetime import date, datetime, timezone

DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_date_only(value: str) -> bool:
    """Return True if ``value`` is a valid ``YYYY-MM-DD`` calendar date."""
    if not DATE_ONLY_RE.match(value.strip()):
        return False
    try:
        date.fromisoformat(value.strip())
    except ValueError:
        return False
    return True


def format_date_only(dt: datetime | None) -> str:
    """
    Format a timestamp as its UTC calendar date.

    Naive datetimes are treated as UTC.

    Returns:
        "YYYY-MM-DD", or "" when ``dt`` is None
    """
    if dt is None:
        return ""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).date().isoformat()


def parse_date_only(value: str | None) -> datetime | None:
    """
    Parse a ``YYYY-MM-DD`` string into midnight UTC of that day.

    Empty or malformed values yield None.
    """
    if not value or not is_date_only(value):
        return None
    d = date.fromisoformat(value.strip())
    return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)


def days_until(dt: datetime, now: datetime | None = None) -> int:
    """Whole calendar days from ``now`` (UTC) until ``dt``; negative when past."""
    now = now or datetime.now(timezone.utc)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (dt.astimezone(timezone.utc).date() - now.astimezone(timezone.utc).date()).days
