"""
Pydantic schemas for diet records.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import MealType


class DietRecordCreate(BaseModel):
    """Schema for logging a meal."""
    user_id: Optional[str] = Field(None, description="ID of the user who ate the meal")
    meal_type: Optional[MealType] = Field(None, examples=["Lunch"])
    food_items: Optional[str] = Field(None, max_length=1000, description="Comma-separated food items", examples=["rice, lentils, salad"])
    calories: Optional[int] = Field(None, ge=0, examples=[650])


class DietRecord(BaseModel):
    """A stored diet record."""
    id: str
    user_id: str
    meal_type: MealType
    food_items: str
    calories: int = 0
    recorded_at: int

    model_config = ConfigDict(frozen=True)
