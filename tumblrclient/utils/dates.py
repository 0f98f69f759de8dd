"""Conversions between datetimes and Tumblr's epoch-second timestamps."""

from datetime import datetime, timezone


def to_timestamp(value: datetime) -> int:
    """Convert a datetime to epoch seconds.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def from_timestamp(value: int) -> datetime:
    """Convert epoch seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(value, tz=timezone.utc)
