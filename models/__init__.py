"""
Domain value types for the health tracker.
"""
from models.enums import (
    UserType,
    HealthStatus,
    MealType,
    ExerciseType,
    Intensity,
    Mood,
    StressLevel,
)

__all__ = [
    "UserType",
    "HealthStatus",
    "MealType",
    "ExerciseType",
    "Intensity",
    "Mood",
    "StressLevel",
]
