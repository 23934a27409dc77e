"""
Shared exception classes and error handling utilities for the Health Tracker API.

This module provides:
- The message taxonomy (Success, Error, NotFound, InvalidPayload)
- Custom exception hierarchy for domain-specific errors
- Exception handlers for FastAPI integration

Usage:
    from core.exceptions import NotFoundError, InvalidPayloadError

    # In service layer - raise domain exceptions
    raise InvalidPayloadError("User not found.", field="user_id")

    # In FastAPI - register handlers via setup_exception_handlers(app)
"""
import logging
from enum import Enum
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MessageKind(str, Enum):
    """Kinds of message a tracker operation can report."""

    SUCCESS = "Success"
    ERROR = "Error"
    NOT_FOUND = "NotFound"
    INVALID_PAYLOAD = "InvalidPayload"


# =============================================================================
# BASE EXCEPTION CLASS
# =============================================================================

class HealthTrackerError(Exception):
    """
    Base exception for all Health Tracker domain errors.

    Carries the message kind, an HTTP status code and a human-readable
    detail message. Extra keyword arguments are kept as response context.
    """

    kind: MessageKind = MessageKind.ERROR
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs: Any
    ):
        self.detail = detail or self.__class__.detail
        self.status_code = status_code or self.__class__.status_code
        self.context = kwargs
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        result: Dict[str, Any] = {"kind": self.kind.value, "detail": self.detail}
        if self.context:
            result["context"] = self.context
        return result


# =============================================================================
# LOOKUP AND VALIDATION EXCEPTIONS
# =============================================================================

class NotFoundError(HealthTrackerError):
    """Raised when a lookup or filter yields nothing."""

    kind = MessageKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Not found"


class InvalidPayloadError(HealthTrackerError):
    """
    Raised when a create payload is rejected.

    Covers missing required fields, malformed values, uniqueness
    violations and unresolved foreign-key references.
    """

    kind = MessageKind.INVALID_PAYLOAD
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid payload"


class MissingFieldsError(InvalidPayloadError):
    """Raised when one or more required fields are absent or blank."""

    detail = "Required fields are missing."

    def __init__(self, missing_fields: Optional[list] = None, **kwargs: Any):
        super().__init__(missing_fields=missing_fields or [], **kwargs)


class ReferenceNotFoundError(InvalidPayloadError):
    """Raised when a foreign key does not resolve to an existing record."""

    def __init__(self, referent: str, field: str, value: Any, **kwargs: Any):
        super().__init__(
            detail=f"{referent} not found.",
            field=field,
            value=value,
            **kwargs
        )


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def health_tracker_exception_handler(
    request: Request,
    exc: HealthTrackerError
) -> JSONResponse:
    """Log a domain error and return it as a JSON response."""
    logger.warning(
        f"{exc.kind.value}: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "context": exc.context
        }
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(HealthTrackerError, health_tracker_exception_handler)
