"""
Service layer for business logic.
"""
from services.record_service import ForeignKey, RecordService
from services.tracker_service import HealthTrackerService, new_record_id

__all__ = [
    "ForeignKey",
    "RecordService",
    "HealthTrackerService",
    "new_record_id",
]
