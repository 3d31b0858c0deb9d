"""UTC helpers: every timestamp stored or returned by pm-api is timezone-aware UTC.

Invariants:
    - Naive datetimes are interpreted as UTC (SQLite hands them back naive)
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
