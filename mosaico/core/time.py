"""UTC timestamps for stored rankings and API payloads."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 string with an explicit UTC offset.

    SQLite hands datetimes back without tzinfo; those are stored as UTC, so
    naive values are tagged rather than converted.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


__all__ = ["isoformat_utc", "utcnow"]
