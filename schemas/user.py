"""
Pydantic schemas for user profiles.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import UserType


class UserCreate(BaseModel):
    """Schema for registering a new user.

    Emails must be unique across all users. The caller's principal is
    recorded as the profile owner.
    """
    name: Optional[str] = Field(None, max_length=200, description="Full name", examples=["Alice"])
    contact: Optional[str] = Field(None, max_length=100, description="Phone or other contact", examples=["555-0100"])
    email: Optional[str] = Field(None, max_length=254, description="Email address (must be unique)", examples=["alice@example.com"])
    user_type: Optional[UserType] = Field(None, description="Role of the user", examples=["Elderly"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice",
                "contact": "555-0100",
                "email": "alice@example.com",
                "user_type": "Elderly"
            }
        }
    )


class User(BaseModel):
    """A stored user profile."""
    id: str = Field(..., description="Unique user identifier")
    name: str
    contact: str
    email: str
    user_type: UserType
    owner: str = Field(..., description="Principal that created the profile")
    created_at: int = Field(..., description="Creation time in epoch nanoseconds")

    model_config = ConfigDict(frozen=True)
