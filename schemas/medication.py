"""
Pydantic schemas for medication reminders.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MedicationReminderCreate(BaseModel):
    """Schema for creating a medication reminder."""
    user_id: Optional[str] = Field(None, description="ID of the user taking the medication")
    medication_name: Optional[str] = Field(None, max_length=200, examples=["Metformin"])
    dosage: Optional[str] = Field(None, max_length=100, examples=["500 mg"])
    schedule: Optional[str] = Field(None, max_length=200, description="When to take it", examples=["Twice daily with meals"])


class MedicationReminder(BaseModel):
    """A stored medication reminder."""
    id: str
    user_id: str
    medication_name: str
    dosage: str
    schedule: str = ""
    created_at: int

    model_config = ConfigDict(frozen=True)
