"""Datetime helpers for values read back from the database."""
from datetime import datetime, UTC
from typing import Optional


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Return ``dt`` as a timezone-aware UTC datetime.

    SQLite hands ``DateTime(timezone=True)`` columns back without tzinfo;
    those values were written as UTC and are tagged as such. Aware values in
    another zone are converted.

    Example:
        >>> ensure_utc(datetime(2019, 5, 1, 12, 0)).tzinfo is UTC
        True
        >>> ensure_utc(None) is None
        True
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
