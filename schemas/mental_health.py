"""
Pydantic schemas for mental health check-ins.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import Mood, StressLevel


class MentalHealthRecordCreate(BaseModel):
    """Schema for recording a mood and stress check-in."""
    user_id: Optional[str] = Field(None, description="ID of the user checking in")
    mood: Optional[Mood] = Field(None, examples=["Happy"])
    stress_level: Optional[StressLevel] = Field(None, examples=["Low"])
    notes: Optional[str] = Field(None, max_length=2000, description="Any additional notes")


class MentalHealthRecord(BaseModel):
    """A stored mental health check-in."""
    id: str
    user_id: str
    mood: Mood
    stress_level: StressLevel
    notes: str = ""
    recorded_at: int

    model_config = ConfigDict(frozen=True)
