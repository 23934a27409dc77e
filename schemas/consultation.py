"""
Pydantic schemas for virtual consultations.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONSULTATION_STATUS = "Scheduled"


class VirtualConsultationCreate(BaseModel):
    """Schema for booking a virtual consultation.

    Both the patient (user_id) and the provider (provider_id) must be
    registered users. Status defaults to "Scheduled" when omitted.
    """
    user_id: Optional[str] = Field(None, description="ID of the patient")
    provider_id: Optional[str] = Field(None, description="ID of the healthcare provider")
    scheduled_at: Optional[int] = Field(None, ge=0, description="Appointment time in epoch nanoseconds")
    status: Optional[str] = Field(None, max_length=50, examples=[DEFAULT_CONSULTATION_STATUS])


class VirtualConsultation(BaseModel):
    """A stored virtual consultation."""
    id: str
    user_id: str
    provider_id: str
    scheduled_at: int
    status: str = DEFAULT_CONSULTATION_STATUS
    created_at: int

    model_config = ConfigDict(frozen=True)
