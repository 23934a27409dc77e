"""
Caller identity for Health Tracker requests.

Callers identify themselves with an opaque principal in the
X-Caller-Principal header. The principal is recorded as the owner of the
user profiles they create and used to look up "my profile". It is never
verified: there is no authorization in this service.
"""
import logging
from typing import Optional

from fastapi import Security
from fastapi.security import APIKeyHeader

from core.config import settings

logger = logging.getLogger(__name__)

CALLER_HEADER_NAME = "X-Caller-Principal"

caller_principal_header = APIKeyHeader(
    name=CALLER_HEADER_NAME,
    auto_error=False,
    description="Opaque principal of the calling identity. Anonymous if omitted.",
)


async def get_caller_identity(
    principal: Optional[str] = Security(caller_principal_header),
) -> str:
    """
    Resolve the identity of the current caller.

    Args:
        principal: Value of the X-Caller-Principal header, if sent.

    Returns:
        str: The caller's principal, or the configured anonymous principal.
    """
    if principal is None or not principal.strip():
        logger.debug("Request without caller principal, using anonymous principal")
        return settings.tracker_anonymous_principal
    return principal.strip()
