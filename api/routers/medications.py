"""
Medication reminders router.
"""
from typing import List

from fastapi import APIRouter, Depends

from schemas import MedicationReminderCreate, MedicationReminder
from services import HealthTrackerService
from core.dependencies import get_tracker_service

router = APIRouter(
    prefix="/api/v1/medication-reminders",
    tags=["Medication Reminders"],
)


@router.post(
    "",
    response_model=MedicationReminder,
    status_code=201,
    summary="Create a medication reminder"
)
async def create_medication_reminder(
    payload: MedicationReminderCreate,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.create_medication_reminder(payload)


@router.get("", response_model=List[MedicationReminder], summary="List all medication reminders")
async def list_medication_reminders(tracker: HealthTrackerService = Depends(get_tracker_service)):
    return tracker.get_all_medication_reminders()


@router.get(
    "/by-user/{user_id}",
    response_model=List[MedicationReminder],
    summary="List a user's medication reminders",
    description="Reminders for one user in creation order. 404 if the user has none."
)
async def list_user_medication_reminders(
    user_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_medication_reminders_by_user_id(user_id)


@router.get("/{reminder_id}", response_model=MedicationReminder, summary="Get a medication reminder by ID")
async def get_medication_reminder(
    reminder_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_medication_reminder_by_id(reminder_id)
