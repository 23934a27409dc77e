"""
Pydantic schemas for exercise recommendations.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import ExerciseType, Intensity


class ExerciseRecommendationCreate(BaseModel):
    """Schema for recommending an exercise to a user."""
    user_id: Optional[str] = Field(None, description="ID of the user the exercise is recommended for")
    exercise_type: Optional[ExerciseType] = Field(None, examples=["Cardio"])
    duration: Optional[int] = Field(None, ge=0, description="Duration in minutes", examples=[30])
    intensity: Optional[Intensity] = Field(None, examples=["Medium"])


class ExerciseRecommendation(BaseModel):
    """A stored exercise recommendation."""
    id: str
    user_id: str
    exercise_type: ExerciseType
    duration: int
    intensity: Intensity
    recommended_at: int

    model_config = ConfigDict(frozen=True)
