"""
Users router - user profile endpoints.

Architecture:
    HTTP Request → Router (this file) → HealthTrackerService → RecordStore → Database

The caller's principal (X-Caller-Principal header) is recorded as the owner
of profiles they create and resolves GET /api/v1/users/me.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends

from schemas import UserCreate, User
from services import HealthTrackerService
from core.dependencies import get_tracker_service
from core.identity import get_caller_identity

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/users",
    tags=["Users"],
)


@router.post(
    "",
    response_model=User,
    status_code=201,
    summary="Register a user",
    description="Create a user profile owned by the calling principal. Emails must be unique."
)
async def create_user(
    payload: UserCreate,
    caller: str = Depends(get_caller_identity),
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    """
    Register a user.

    - **name**, **contact**, **email**, **user_type**: required

    Raises:
    - 400 InvalidPayload: missing fields, malformed or duplicate email
    """
    return tracker.create_user(payload, caller)


@router.get(
    "",
    response_model=List[User],
    summary="List all users",
    description="All users in registration order. 404 if there are none."
)
async def list_users(tracker: HealthTrackerService = Depends(get_tracker_service)):
    return tracker.get_all_users()


# Declared before /{user_id} so "me" is not taken for an id
@router.get(
    "/me",
    response_model=User,
    summary="Get my profile",
    description="The profile owned by the calling principal."
)
async def get_my_profile(
    caller: str = Depends(get_caller_identity),
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_user_by_caller(caller)


@router.get(
    "/{user_id}",
    response_model=User,
    summary="Get a user by ID"
)
async def get_user(
    user_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_user_by_id(user_id)
