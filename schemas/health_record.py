"""
Pydantic schemas for vitals readings.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import HealthStatus


class HealthRecordCreate(BaseModel):
    """Schema for recording a vitals reading.

    The user must exist before a record can be created for them.
    """
    user_id: Optional[str] = Field(None, description="ID of the user the reading belongs to")
    heart_rate: Optional[int] = Field(None, ge=0, description="Heart rate in beats per minute", examples=[72])
    blood_pressure: Optional[str] = Field(None, max_length=20, description="Blood pressure reading", examples=["120/80"])
    activity_level: Optional[str] = Field(None, max_length=100, description="Free-text activity level", examples=["Moderate"])
    status: Optional[HealthStatus] = Field(None, description="Overall condition", examples=["Stable"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "3f2b8c1e-7a4d-4e8b-9c1a-2d5f6e7a8b9c",
                "heart_rate": 72,
                "blood_pressure": "120/80",
                "activity_level": "Moderate",
                "status": "Stable"
            }
        }
    )


class HealthRecord(BaseModel):
    """A stored vitals reading."""
    id: str
    user_id: str
    heart_rate: int
    blood_pressure: str
    activity_level: str = ""
    status: HealthStatus
    recorded_at: int = Field(..., description="Time of recording in epoch nanoseconds")

    model_config = ConfigDict(frozen=True)
