"""
Validators for tracker payloads.
"""
from services.validators.payload_validator import (
    EMAIL_PATTERN,
    is_valid_email,
    validate_user,
    validate_fitness_challenge,
)

__all__ = [
    "EMAIL_PATTERN",
    "is_valid_email",
    "validate_user",
    "validate_fitness_challenge",
]
