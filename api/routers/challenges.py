"""
Fitness challenges router - challenges and their participants.
"""
from typing import List

from fastapi import APIRouter, Depends

from schemas import (
    FitnessChallengeCreate,
    FitnessChallenge,
    FitnessChallengeParticipantCreate,
    FitnessChallengeParticipant,
)
from services import HealthTrackerService
from core.dependencies import get_tracker_service

router = APIRouter(
    prefix="/api/v1/fitness-challenges",
    tags=["Fitness Challenges"],
)


@router.post("", response_model=FitnessChallenge, status_code=201, summary="Create a fitness challenge")
async def create_fitness_challenge(
    payload: FitnessChallengeCreate,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    """
    Raises:
    - 400 InvalidPayload: missing fields or end_date before start_date
    """
    return tracker.create_fitness_challenge(payload)


@router.get("", response_model=List[FitnessChallenge], summary="List all fitness challenges")
async def list_fitness_challenges(tracker: HealthTrackerService = Depends(get_tracker_service)):
    return tracker.get_all_fitness_challenges()


@router.post(
    "/participants",
    response_model=FitnessChallengeParticipant,
    status_code=201,
    summary="Join a fitness challenge"
)
async def create_fitness_challenge_participant(
    payload: FitnessChallengeParticipantCreate,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    """
    Raises:
    - 400 InvalidPayload: missing fields, unknown challenge or unknown user
    """
    return tracker.create_fitness_challenge_participant(payload)


@router.get(
    "/participants",
    response_model=List[FitnessChallengeParticipant],
    summary="List all challenge participants"
)
async def list_fitness_challenge_participants(tracker: HealthTrackerService = Depends(get_tracker_service)):
    return tracker.get_all_fitness_challenge_participants()
