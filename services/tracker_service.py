"""
Service layer for the health tracker.

HealthTrackerService owns one RecordStore per entity kind and exposes every
tracker operation by name. Each store is wrapped in a RecordService that
carries the entity's required fields, validation rules and foreign keys.

Architecture:
    API Layer (routers) → HealthTrackerService → RecordService → RecordStore → Database

Dependency Injection:
    The database, clock and id factory are passed in by
    core.dependencies.get_tracker_service().
"""
import logging
import uuid
from functools import partial
from typing import Any, Callable, Dict, List, Optional

from core.datetime_utils import MonotonicClock
from core.exceptions import InvalidPayloadError, NotFoundError
from models import ExerciseType
from repositories import Database, RecordStore
from schemas import (
    DEFAULT_CONSULTATION_STATUS,
    DietRecord,
    DietRecordCreate,
    ExerciseRecommendation,
    ExerciseRecommendationCreate,
    FitnessChallenge,
    FitnessChallengeCreate,
    FitnessChallengeParticipant,
    FitnessChallengeParticipantCreate,
    HealthRecord,
    HealthRecordCreate,
    MedicationReminder,
    MedicationReminderCreate,
    MentalHealthRecord,
    MentalHealthRecordCreate,
    User,
    UserCreate,
    VirtualConsultation,
    VirtualConsultationCreate,
)
from services.record_service import ForeignKey, RecordService, is_blank
from services.validators import validate_fitness_challenge, validate_user

logger = logging.getLogger(__name__)


def new_record_id() -> str:
    """Generate a fresh record id (UUID4)."""
    return str(uuid.uuid4())


def _default_consultation_status(data: Dict[str, Any]) -> Dict[str, Any]:
    if is_blank(data.get("status")):
        data["status"] = DEFAULT_CONSULTATION_STATUS
    return data


class HealthTrackerService:
    """
    All tracker operations over nine append-only record stores.

    Lookups that find nothing raise NotFoundError; rejected payloads raise
    InvalidPayloadError. Neither ever leaves a partial write.
    """

    def __init__(
        self,
        db: Database,
        clock: Optional[MonotonicClock] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """
        Args:
            db: Database backing every store.
            clock: Time source for record timestamps. A fresh clock if omitted.
            id_factory: Record id generator. UUID4 strings if omitted.
        """
        clock = clock or MonotonicClock()
        id_factory = id_factory or new_record_id
        common = {"clock": clock, "id_factory": id_factory}

        user_store = RecordStore(db, "users", User)
        challenge_store = RecordStore(db, "fitness_challenges", FitnessChallenge)
        user_fk = ForeignKey(field="user_id", store=user_store, referent="User")

        self.users = RecordService(
            user_store, User,
            entity="User", plural="users",
            required=("name", "contact", "email", "user_type"),
            validate=partial(validate_user, users=user_store),
            **common
        )
        self.health_records = RecordService(
            RecordStore(db, "health_records", HealthRecord), HealthRecord,
            entity="Health record", plural="health records",
            required=("user_id", "heart_rate", "blood_pressure", "status"),
            nonzero=("heart_rate",),
            references=(user_fk,),
            timestamp_field="recorded_at",
            **common
        )
        self.medication_reminders = RecordService(
            RecordStore(db, "medication_reminders", MedicationReminder), MedicationReminder,
            entity="Medication reminder", plural="medication reminders",
            required=("user_id", "medication_name", "dosage"),
            references=(user_fk,),
            **common
        )
        self.virtual_consultations = RecordService(
            RecordStore(db, "virtual_consultations", VirtualConsultation), VirtualConsultation,
            entity="Virtual consultation", plural="virtual consultations",
            required=("user_id", "provider_id", "scheduled_at"),
            nonzero=("scheduled_at",),
            references=(
                user_fk,
                ForeignKey(field="provider_id", store=user_store, referent="Provider"),
            ),
            shape=_default_consultation_status,
            **common
        )
        self.diet_records = RecordService(
            RecordStore(db, "diet_records", DietRecord), DietRecord,
            entity="Diet record", plural="diet records",
            required=("user_id", "meal_type", "food_items"),
            references=(user_fk,),
            timestamp_field="recorded_at",
            **common
        )
        self.exercise_recommendations = RecordService(
            RecordStore(db, "exercise_recommendations", ExerciseRecommendation), ExerciseRecommendation,
            entity="Exercise recommendation", plural="exercise recommendations",
            required=("user_id", "exercise_type", "duration", "intensity"),
            nonzero=("duration",),
            references=(user_fk,),
            timestamp_field="recommended_at",
            **common
        )
        self.mental_health_records = RecordService(
            RecordStore(db, "mental_health_records", MentalHealthRecord), MentalHealthRecord,
            entity="Mental health record", plural="mental health records",
            required=("user_id", "mood", "stress_level"),
            references=(user_fk,),
            timestamp_field="recorded_at",
            **common
        )
        self.fitness_challenges = RecordService(
            challenge_store, FitnessChallenge,
            entity="Fitness challenge", plural="fitness challenges",
            required=("name", "description", "start_date", "end_date"),
            nonzero=("start_date", "end_date"),
            validate=validate_fitness_challenge,
            **common
        )
        self.fitness_challenge_participants = RecordService(
            RecordStore(db, "fitness_challenge_participants", FitnessChallengeParticipant),
            FitnessChallengeParticipant,
            entity="Fitness challenge participant", plural="fitness challenge participants",
            required=("challenge_id", "user_id"),
            references=(
                ForeignKey(field="challenge_id", store=challenge_store, referent="Challenge"),
                user_fk,
            ),
            timestamp_field="updated_at",
            **common
        )

    # =========================================================================
    # USERS
    # =========================================================================

    def create_user(self, payload: UserCreate, caller: str) -> User:
        """Register a user owned by `caller`. Emails must be unique."""
        return self.users.create(payload, owner=caller)

    def get_user_by_id(self, user_id: str) -> User:
        return self.users.get_by_id(user_id)

    def get_user_by_caller(self, caller: str) -> User:
        """
        The first profile owned by `caller`.

        Raises:
            NotFoundError: If the caller owns no profile.
        """
        user = self.users.first_by("owner", caller)
        if user is None:
            raise NotFoundError(f"User not found for principal {caller}")
        return user

    def get_all_users(self) -> List[User]:
        return self.users.get_all()

    # =========================================================================
    # HEALTH RECORDS
    # =========================================================================

    def create_health_record(self, payload: HealthRecordCreate) -> HealthRecord:
        return self.health_records.create(payload)

    def get_health_record_by_id(self, record_id: str) -> HealthRecord:
        return self.health_records.get_by_id(record_id)

    def get_all_health_records(self) -> List[HealthRecord]:
        return self.health_records.get_all()

    # =========================================================================
    # MEDICATION REMINDERS
    # =========================================================================

    def create_medication_reminder(self, payload: MedicationReminderCreate) -> MedicationReminder:
        return self.medication_reminders.create(payload)

    def get_medication_reminder_by_id(self, reminder_id: str) -> MedicationReminder:
        return self.medication_reminders.get_by_id(reminder_id)

    def get_medication_reminders_by_user_id(self, user_id: str) -> List[MedicationReminder]:
        return self.medication_reminders.filter_by("user_id", user_id)

    def get_all_medication_reminders(self) -> List[MedicationReminder]:
        return self.medication_reminders.get_all()

    # =========================================================================
    # VIRTUAL CONSULTATIONS
    # =========================================================================

    def create_virtual_consultation(self, payload: VirtualConsultationCreate) -> VirtualConsultation:
        """Book a consultation. Status is "Scheduled" unless the payload sets one."""
        return self.virtual_consultations.create(payload)

    def get_virtual_consultation_by_id(self, consultation_id: str) -> VirtualConsultation:
        return self.virtual_consultations.get_by_id(consultation_id)

    def get_virtual_consultations_by_user_id(self, user_id: str) -> List[VirtualConsultation]:
        return self.virtual_consultations.filter_by("user_id", user_id)

    def get_virtual_consultations_by_provider_id(self, provider_id: str) -> List[VirtualConsultation]:
        return self.virtual_consultations.filter_by("provider_id", provider_id)

    def get_all_virtual_consultations(self) -> List[VirtualConsultation]:
        return self.virtual_consultations.get_all()

    # =========================================================================
    # DIET RECORDS
    # =========================================================================

    def create_diet_record(self, payload: DietRecordCreate) -> DietRecord:
        return self.diet_records.create(payload)

    def get_diet_record_by_id(self, record_id: str) -> DietRecord:
        return self.diet_records.get_by_id(record_id)

    def get_diet_records_by_user_id(self, user_id: str) -> List[DietRecord]:
        return self.diet_records.filter_by("user_id", user_id)

    def get_all_diet_records(self) -> List[DietRecord]:
        return self.diet_records.get_all()

    # =========================================================================
    # EXERCISE RECOMMENDATIONS
    # =========================================================================

    def create_exercise_recommendation(self, payload: ExerciseRecommendationCreate) -> ExerciseRecommendation:
        return self.exercise_recommendations.create(payload)

    def get_exercise_recommendation_by_id(self, recommendation_id: str) -> ExerciseRecommendation:
        return self.exercise_recommendations.get_by_id(recommendation_id)

    def get_exercise_recommendations_by_user_id(self, user_id: str) -> List[ExerciseRecommendation]:
        return self.exercise_recommendations.filter_by("user_id", user_id)

    def get_exercise_recommendations_by_type(self, exercise_type: ExerciseType) -> List[ExerciseRecommendation]:
        """
        Raises:
            InvalidPayloadError: If exercise_type is not a known type.
            NotFoundError: If no recommendation has this type.
        """
        try:
            exercise_type = ExerciseType(exercise_type)
        except ValueError:
            raise InvalidPayloadError(
                f"Unknown exercise type: {exercise_type}", exercise_type=str(exercise_type)
            ) from None
        return self.exercise_recommendations.filter_by("exercise_type", exercise_type)

    def get_all_exercise_recommendations(self) -> List[ExerciseRecommendation]:
        return self.exercise_recommendations.get_all()

    # =========================================================================
    # MENTAL HEALTH RECORDS
    # =========================================================================

    def create_mental_health_record(self, payload: MentalHealthRecordCreate) -> MentalHealthRecord:
        return self.mental_health_records.create(payload)

    def get_all_mental_health_records(self) -> List[MentalHealthRecord]:
        return self.mental_health_records.get_all()

    # =========================================================================
    # FITNESS CHALLENGES
    # =========================================================================

    def create_fitness_challenge(self, payload: FitnessChallengeCreate) -> FitnessChallenge:
        return self.fitness_challenges.create(payload)

    def get_all_fitness_challenges(self) -> List[FitnessChallenge]:
        return self.fitness_challenges.get_all()

    def create_fitness_challenge_participant(
        self,
        payload: FitnessChallengeParticipantCreate
    ) -> FitnessChallengeParticipant:
        """Enroll a user in a challenge. Both must already exist."""
        return self.fitness_challenge_participants.create(payload)

    def get_all_fitness_challenge_participants(self) -> List[FitnessChallengeParticipant]:
        return self.fitness_challenge_participants.get_all()
