"""
Virtual consultations router.

Both the patient and the provider are registered users; consultations can
be listed from either side.
"""
from typing import List

from fastapi import APIRouter, Depends

from schemas import VirtualConsultationCreate, VirtualConsultation
from services import HealthTrackerService
from core.dependencies import get_tracker_service

router = APIRouter(
    prefix="/api/v1/consultations",
    tags=["Virtual Consultations"],
)


@router.post(
    "",
    response_model=VirtualConsultation,
    status_code=201,
    summary="Book a virtual consultation",
    description="Status defaults to 'Scheduled' when omitted."
)
async def create_virtual_consultation(
    payload: VirtualConsultationCreate,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    """
    Raises:
    - 400 InvalidPayload: missing fields, unknown user or unknown provider
    """
    return tracker.create_virtual_consultation(payload)


@router.get("", response_model=List[VirtualConsultation], summary="List all virtual consultations")
async def list_virtual_consultations(tracker: HealthTrackerService = Depends(get_tracker_service)):
    return tracker.get_all_virtual_consultations()


@router.get(
    "/by-user/{user_id}",
    response_model=List[VirtualConsultation],
    summary="List a patient's consultations"
)
async def list_user_consultations(
    user_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_virtual_consultations_by_user_id(user_id)


@router.get(
    "/by-provider/{provider_id}",
    response_model=List[VirtualConsultation],
    summary="List a provider's consultations"
)
async def list_provider_consultations(
    provider_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_virtual_consultations_by_provider_id(provider_id)


@router.get("/{consultation_id}", response_model=VirtualConsultation, summary="Get a consultation by ID")
async def get_virtual_consultation(
    consultation_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_virtual_consultation_by_id(consultation_id)
