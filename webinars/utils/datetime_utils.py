"""
DateTime Utilities
==================

Datetime handling shared by the storage adapters.

Functions:
- to_utc(): Timezone-aware UTC datetime (naive values are taken as UTC)
- to_storage_precision(): UTC datetime truncated to what BSON keeps
"""
from datetime import datetime, timezone


def to_utc(dt: datetime) -> datetime:
    """
    Convert a datetime to timezone-aware UTC.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        timezone-aware datetime in UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_storage_precision(dt: datetime) -> datetime:
    """
    Convert a datetime to the exact value MongoDB returns for it.

    BSON dates are UTC milliseconds, so microseconds below the millisecond
    are dropped.
    """
    dt = to_utc(dt)
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)
