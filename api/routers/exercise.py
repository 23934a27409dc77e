"""
Exercise recommendations router.
"""
from typing import List

from fastapi import APIRouter, Depends

from models import ExerciseType
from schemas import ExerciseRecommendationCreate, ExerciseRecommendation
from services import HealthTrackerService
from core.dependencies import get_tracker_service

router = APIRouter(
    prefix="/api/v1/exercise-recommendations",
    tags=["Exercise Recommendations"],
)


@router.post("", response_model=ExerciseRecommendation, status_code=201, summary="Recommend an exercise")
async def create_exercise_recommendation(
    payload: ExerciseRecommendationCreate,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.create_exercise_recommendation(payload)


@router.get("", response_model=List[ExerciseRecommendation], summary="List all exercise recommendations")
async def list_exercise_recommendations(tracker: HealthTrackerService = Depends(get_tracker_service)):
    return tracker.get_all_exercise_recommendations()


@router.get(
    "/by-user/{user_id}",
    response_model=List[ExerciseRecommendation],
    summary="List a user's exercise recommendations"
)
async def list_user_exercise_recommendations(
    user_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_exercise_recommendations_by_user_id(user_id)


@router.get(
    "/by-type/{exercise_type}",
    response_model=List[ExerciseRecommendation],
    summary="List exercise recommendations of one type",
    description="Exact match on Cardio, Strength or Flexibility."
)
async def list_exercise_recommendations_by_type(
    exercise_type: ExerciseType,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_exercise_recommendations_by_type(exercise_type)


@router.get(
    "/{recommendation_id}",
    response_model=ExerciseRecommendation,
    summary="Get an exercise recommendation by ID"
)
async def get_exercise_recommendation(
    recommendation_id: str,
    tracker: HealthTrackerService = Depends(get_tracker_service)
):
    return tracker.get_exercise_recommendation_by_id(recommendation_id)
