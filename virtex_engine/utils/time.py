"""
Epoch timestamp conversion.

Integer arithmetic only; no float round trip.
"""
from datetime import datetime, timedelta, timezone

from ..core.errors import NumberFormatError, TimeRangeError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """Convert millisecond timestamp to datetime (UTC)."""
    try:
        return EPOCH + timedelta(milliseconds=timestamp_ms)
    except OverflowError:
        raise TimeRangeError(f"Timestamp out of range: {timestamp_ms}ms") from None


def seconds_to_datetime(timestamp_s) -> datetime:
    """Convert epoch seconds to datetime (UTC), via milliseconds."""
    if isinstance(timestamp_s, bool):
        raise NumberFormatError(f"Not an epoch timestamp: {timestamp_s!r}")
    try:
        seconds = int(timestamp_s)
    except (TypeError, ValueError, OverflowError):
        raise NumberFormatError(f"Not an epoch timestamp: {timestamp_s!r}") from None
    return ms_to_datetime(seconds * 1000)


def datetime_to_ms(dt: datetime) -> int:
    """Convert datetime to millisecond timestamp."""
    return (dt - EPOCH) // timedelta(milliseconds=1)
