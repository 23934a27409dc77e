"""
Diet records router.
"""
from typing import List

from fastapi import APIRouter, Depends

from schemas import DietRecordCreate, DietRecord
from services import HealthTrackerService
from core.dependencies import get_tracker_service

router = APIRouter(
    prefix="/api/v1/diet-records",
    tags=["Diet Records"],
)


@router.post("", response_model=DietRecord, status_code=201, summary="Log a meal")
async def create_diet_record(
    payload: DietRecordCreate,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.create_diet_record(payload)


@router.get("", response_model=List[DietRecord], summary="List all diet records")
async def list_diet_records(tracker: HealthTrackerService = Depends(get_tracker_service)):
    return tracker.get_all_diet_records()


@router.get("/by-user/{user_id}", response_model=List[DietRecord], summary="List a user's diet records")
async def list_user_diet_records(
    user_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_diet_records_by_user_id(user_id)


@router.get("/{record_id}", response_model=DietRecord, summary="Get a diet record by ID")
async def get_diet_record(
    record_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_diet_record_by_id(record_id)
