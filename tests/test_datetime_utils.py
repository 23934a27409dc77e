"""
Tests for the record clock and time formatting helpers.
"""
from datetime import datetime, timezone

from core.datetime_utils import MonotonicClock, format_iso, ns_to_datetime, ns_to_iso


def test_clock_never_goes_backwards():
    """Test that the clock clamps a source that steps back."""
    readings = iter([100, 250, 200, 50, 300])
    clock = MonotonicClock(source=lambda: next(readings))

    assert [clock.now() for _ in range(5)] == [100, 250, 250, 250, 300]


def test_clock_may_repeat_a_reading():
    """Test that equal consecutive readings are allowed."""
    clock = MonotonicClock(source=lambda: 42)
    assert clock.now() == clock.now() == 42


def test_default_clock_reads_epoch_nanoseconds():
    """Test the default clock source."""
    now = MonotonicClock().now()
    # Sometime after 2020-01-01
    assert now > 1_577_836_800 * 1_000_000_000


def test_ns_to_datetime_keeps_microseconds():
    """Test nanosecond to datetime conversion."""
    dt = ns_to_datetime(1_700_000_000_123_456_789)
    assert dt == datetime(2023, 11, 14, 22, 13, 20, 123456, tzinfo=timezone.utc)


def test_ns_to_iso():
    """Test nanosecond to ISO string conversion."""
    assert ns_to_iso(1_700_000_000_123_456_789) == "2023-11-14T22:13:20.123456Z"


def test_format_iso_treats_naive_as_utc():
    """Test that naive datetimes format as UTC."""
    assert format_iso(datetime(2025, 1, 1, 10, 0, 0)) == "2025-01-01T10:00:00Z"
