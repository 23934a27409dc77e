"""
Entity-specific payload rules.

These run after the required-field check and before foreign keys are
resolved. Each raises InvalidPayloadError describing the first problem found.
"""
import logging
import re

from core.exceptions import InvalidPayloadError
from repositories import RecordStore
from schemas import UserCreate, FitnessChallengeCreate

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    """Check for a local@domain.tld shape. Deliverability is not checked."""
    return bool(EMAIL_PATTERN.match(email))


def validate_user(payload: UserCreate, users: RecordStore) -> None:
    """
    Validate a new user's email.

    Args:
        payload: The user payload (required fields already present).
        users: The user store, scanned for an existing email.

    Raises:
        InvalidPayloadError: If the email is malformed or already registered.
    """
    if not is_valid_email(payload.email):
        logger.warning("Rejected user payload: invalid email format")
        raise InvalidPayloadError("Invalid email format", field="email")

    if any(user.email == payload.email for user in users.values()):
        logger.warning("Rejected user payload: email already registered")
        raise InvalidPayloadError("Email already exists.", field="email")


def validate_fitness_challenge(payload: FitnessChallengeCreate) -> None:
    """
    Raises:
        InvalidPayloadError: If the challenge ends before it starts.
    """
    if payload.end_date < payload.start_date:
        raise InvalidPayloadError(
            "Challenge end_date must not precede start_date.",
            start_date=payload.start_date,
            end_date=payload.end_date
        )
