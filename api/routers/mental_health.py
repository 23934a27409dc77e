"""
Mental health records router.
"""
from typing import List

from fastapi import APIRouter, Depends

from schemas import MentalHealthRecordCreate, MentalHealthRecord
from services import HealthTrackerService
from core.dependencies import get_tracker_service

router = APIRouter(
    prefix="/api/v1/mental-health-records",
    tags=["Mental Health"],
)


@router.post("", response_model=MentalHealthRecord, status_code=201, summary="Record a mood check-in")
async def create_mental_health_record(
    payload: MentalHealthRecordCreate,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.create_mental_health_record(payload)


@router.get("", response_model=List[MentalHealthRecord], summary="List all mental health records")
async def list_mental_health_records(tracker: HealthTrackerService = Depends(get_tracker_service)):
    return tracker.get_all_mental_health_records()
