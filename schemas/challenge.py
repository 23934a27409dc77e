"""
Pydantic schemas for fitness challenges and their participants.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FitnessChallengeCreate(BaseModel):
    """Schema for creating a fitness challenge.

    Dates are epoch nanoseconds; end_date must not precede start_date.
    """
    name: Optional[str] = Field(None, max_length=200, examples=["10k Steps a Day"])
    description: Optional[str] = Field(None, max_length=2000, examples=["Walk 10,000 steps every day for a month"])
    start_date: Optional[int] = Field(None, ge=0)
    end_date: Optional[int] = Field(None, ge=0)


class FitnessChallenge(BaseModel):
    """A stored fitness challenge."""
    id: str
    name: str
    description: str
    start_date: int
    end_date: int
    created_at: int

    model_config = ConfigDict(frozen=True)


class FitnessChallengeParticipantCreate(BaseModel):
    """Schema for enrolling a user in a fitness challenge."""
    challenge_id: Optional[str] = Field(None, description="ID of the challenge to join")
    user_id: Optional[str] = Field(None, description="ID of the participating user")
    progress: Optional[int] = Field(None, ge=0, description="Progress toward the challenge goal", examples=[0])


class FitnessChallengeParticipant(BaseModel):
    """A stored challenge participation."""
    id: str
    challenge_id: str
    user_id: str
    progress: int = 0
    updated_at: int

    model_config = ConfigDict(frozen=True)
