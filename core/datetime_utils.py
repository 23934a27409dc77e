"""
Time utilities for the Health Tracker service.

Record timestamps are integers: nanoseconds since the Unix epoch (UTC).
The clock never goes backwards within a process, so timestamps are
non-decreasing in insertion order even if the system clock is adjusted.

Usage:
    from core.datetime_utils import MonotonicClock, ns_to_iso

    clock = MonotonicClock()
    created_at = clock.now()   # 1768473000123456789
    ns_to_iso(created_at)      # "2026-01-15T10:30:00.123456Z"
"""
import time
from datetime import datetime, timezone
from typing import Callable, Optional

NANOS_PER_SECOND = 1_000_000_000


def utc_now() -> datetime:
    """Get current datetime in UTC with timezone info."""
    return datetime.now(timezone.utc)


def format_iso(dt: datetime) -> str:
    """Format a datetime as ISO 8601 UTC with a 'Z' suffix, to the second."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def ns_to_datetime(ns: int) -> datetime:
    """Convert epoch nanoseconds to an aware UTC datetime (microsecond precision)."""
    seconds, remainder = divmod(ns, NANOS_PER_SECOND)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(
        microsecond=remainder // 1000
    )


def ns_to_iso(ns: int) -> str:
    """Format epoch nanoseconds as ISO 8601 UTC with microseconds."""
    return ns_to_datetime(ns).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class MonotonicClock:
    """
    Wall-clock time source in epoch nanoseconds that never decreases.

    Readings are clamped to the last value handed out, so two calls may
    return the same value but never a smaller one.
    """

    def __init__(self, source: Optional[Callable[[], int]] = None):
        """
        Args:
            source: Raw nanosecond reader. Defaults to time.time_ns.
        """
        self._source = source or time.time_ns
        self._last = 0

    def now(self) -> int:
        """Return the current time in epoch nanoseconds."""
        reading = self._source()
        if reading < self._last:
            reading = self._last
        self._last = reading
        return reading
