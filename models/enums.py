"""
Closed value sets used by tracker records.

All enums are str-valued so they serialize to their plain names in JSON
and in stored records.
"""
from enum import Enum


class UserType(str, Enum):
    """Role of a registered user."""
    ELDERLY = "Elderly"
    CAREGIVER = "Caregiver"
    HEALTHCARE_PROVIDER = "HealthcareProvider"


class HealthStatus(str, Enum):
    """Overall condition captured with a vitals reading."""
    STABLE = "Stable"
    CRITICAL = "Critical"


class MealType(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"


class ExerciseType(str, Enum):
    CARDIO = "Cardio"
    STRENGTH = "Strength"
    FLEXIBILITY = "Flexibility"


class Intensity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Mood(str, Enum):
    HAPPY = "Happy"
    SAD = "Sad"
    ANXIOUS = "Anxious"


class StressLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
