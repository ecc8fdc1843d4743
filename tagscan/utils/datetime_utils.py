"""
Centralized DateTime Utilities
==============================

All timestamps are persisted as UTC (BSON Date) and rendered as ISO 8601.

Functions:
- utc_now(): Current UTC time as a timezone-aware datetime
- ensure_utc(): Normalize any datetime to timezone-aware UTC
- to_iso(): Convert datetime object to ISO 8601 string
- parse_day_range(): Turn a YYYY-MM-DD filter into a UTC day window
"""
import re
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Optional, Tuple

_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string in UTC.

    Naive datetimes are treated as UTC. Milliseconds are kept and UTC is
    rendered with a trailing "Z" (e.g. "2025-12-24T10:30:00.123Z").

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None
    dt = ensure_utc(dt)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_day_range(day: str) -> Tuple[datetime, datetime]:
    """
    Convert a YYYY-MM-DD string into the [start, end] UTC boundaries of that day.

    Args:
        day: Date string in YYYY-MM-DD format

    Returns:
        Tuple of (start of day, last millisecond of day), both UTC-aware

    Raises:
        ValueError: If the string is not YYYY-MM-DD or is not a real date
    """
    if not day or not _DAY_PATTERN.match(day):
        raise ValueError("Invalid date format. Please use YYYY-MM-DD.")
    try:
        start = datetime.strptime(day, "%Y-%m-%d").replace(tzinfo=dt_timezone.utc)
    except ValueError:
        raise ValueError("Invalid date value.")
    end = start + timedelta(days=1) - timedelta(milliseconds=1)
    return start, end
