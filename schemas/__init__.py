"""
Pydantic schemas for payloads and stored records.

Each entity has a `<Entity>Create` payload (domain fields only, no id or
timestamp) and a frozen `<Entity>` record model used for storage and
API responses.
"""
from schemas.user import UserCreate, User
from schemas.health_record import HealthRecordCreate, HealthRecord
from schemas.medication import MedicationReminderCreate, MedicationReminder
from schemas.consultation import (
    VirtualConsultationCreate,
    VirtualConsultation,
    DEFAULT_CONSULTATION_STATUS,
)
from schemas.diet import DietRecordCreate, DietRecord
from schemas.exercise import ExerciseRecommendationCreate, ExerciseRecommendation
from schemas.mental_health import MentalHealthRecordCreate, MentalHealthRecord
from schemas.challenge import (
    FitnessChallengeCreate,
    FitnessChallenge,
    FitnessChallengeParticipantCreate,
    FitnessChallengeParticipant,
)

__all__ = [
    "UserCreate",
    "User",
    "HealthRecordCreate",
    "HealthRecord",
    "MedicationReminderCreate",
    "MedicationReminder",
    "VirtualConsultationCreate",
    "VirtualConsultation",
    "DEFAULT_CONSULTATION_STATUS",
    "DietRecordCreate",
    "DietRecord",
    "ExerciseRecommendationCreate",
    "ExerciseRecommendation",
    "MentalHealthRecordCreate",
    "MentalHealthRecord",
    "FitnessChallengeCreate",
    "FitnessChallenge",
    "FitnessChallengeParticipantCreate",
    "FitnessChallengeParticipant",
]
