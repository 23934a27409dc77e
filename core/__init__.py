"""
Core module for configuration, error handling, logging and shared utilities.

This module provides:
- Settings: Application configuration via pydantic-settings
- Exceptions: Message taxonomy and domain exception classes
- Time utilities: Non-decreasing nanosecond clock and formatting helpers
"""
from core.config import settings, Settings

from core.exceptions import (
    MessageKind,
    HealthTrackerError,
    NotFoundError,
    InvalidPayloadError,
    MissingFieldsError,
    ReferenceNotFoundError,
    setup_exception_handlers,
)

from core.datetime_utils import (
    MonotonicClock,
    utc_now,
    format_iso,
    ns_to_datetime,
    ns_to_iso,
)

__all__ = [
    "settings",
    "Settings",
    "MessageKind",
    "HealthTrackerError",
    "NotFoundError",
    "InvalidPayloadError",
    "MissingFieldsError",
    "ReferenceNotFoundError",
    "setup_exception_handlers",
    "MonotonicClock",
    "utc_now",
    "format_iso",
    "ns_to_datetime",
    "ns_to_iso",
]
