"""
FastAPI dependency injection for the Health Tracker API.

Architecture Flow:
    API Layer (Routers)
         ↓ Depends(get_tracker_service)
    HealthTrackerService
         ↓ Injected: database, clock, id factory
    Database (SQLite)

The database, clock and service are process-wide: the stores are
append-only and the clock must be shared for timestamps to stay ordered.

Testing:
    app.dependency_overrides[get_tracker_service] = lambda: test_service
"""
import logging
from typing import Callable, Optional

from core.config import settings
from core.datetime_utils import MonotonicClock

logger = logging.getLogger(__name__)


# =============================================================================
# DATABASE DEPENDENCY
# =============================================================================

_database_instance: Optional["Database"] = None


def get_database() -> "Database":
    """
    Get the process-wide database instance, creating it on first use.

    Returns:
        Database: The configured database instance.
    """
    global _database_instance

    if _database_instance is None:
        from repositories import Database

        settings.ensure_directories()
        logger.info(f"Initializing database: {settings.database_path}")
        _database_instance = Database(
            db_path=settings.database_path,
            busy_timeout=settings.tracker_db_busy_timeout
        )

    return _database_instance


# =============================================================================
# CAPABILITY DEPENDENCIES
# =============================================================================

_clock_instance: Optional[MonotonicClock] = None


def get_clock() -> MonotonicClock:
    """Get the process-wide record clock."""
    global _clock_instance

    if _clock_instance is None:
        _clock_instance = MonotonicClock()
    return _clock_instance


def get_id_factory() -> Callable[[], str]:
    """Get the record id generator."""
    from services import new_record_id

    return new_record_id


# =============================================================================
# SERVICE DEPENDENCIES
# =============================================================================

_service_instance: Optional["HealthTrackerService"] = None


def get_tracker_service() -> "HealthTrackerService":
    """
    Get the HealthTrackerService wired to the database, clock and id factory.

    Returns:
        HealthTrackerService: Service exposing every tracker operation.
    """
    global _service_instance

    if _service_instance is None:
        from services import HealthTrackerService

        _service_instance = HealthTrackerService(
            db=get_database(),
            clock=get_clock(),
            id_factory=get_id_factory()
        )
    return _service_instance


def reset_dependencies() -> None:
    """Drop the cached database, clock and service (for testing only)."""
    global _database_instance, _clock_instance, _service_instance
    _database_instance = None
    _clock_instance = None
    _service_instance = None
