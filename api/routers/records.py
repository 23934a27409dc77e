"""
Health records router - vitals reading endpoints.

Architecture:
    HTTP Request → Router (this file) → HealthTrackerService → RecordStore → Database
"""
from typing import List

from fastapi import APIRouter, Depends

from schemas import HealthRecordCreate, HealthRecord
from services import HealthTrackerService
from core.dependencies import get_tracker_service

router = APIRouter(
    prefix="/api/v1/health-records",
    tags=["Health Records"],
)


@router.post(
    "",
    response_model=HealthRecord,
    status_code=201,
    summary="Record vitals",
    description="Add a vitals reading for an existing user."
)
async def create_health_record(
    payload: HealthRecordCreate,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    """
    Create a health record.

    - **user_id**, **heart_rate**, **blood_pressure**, **status**: required
    - **activity_level**: optional

    Raises:
    - 400 InvalidPayload: missing fields or unknown user
    """
    return tracker.create_health_record(payload)


@router.get("", response_model=List[HealthRecord], summary="List all health records")
async def list_health_records(tracker: HealthTrackerService = Depends(get_tracker_service)):
    return tracker.get_all_health_records()


@router.get("/{record_id}", response_model=HealthRecord, summary="Get a health record by ID")
async def get_health_record(
    record_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_health_record_by_id(record_id)
