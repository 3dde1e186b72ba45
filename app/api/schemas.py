"""
Pydantic request and response models for the JSON API.

Request models run in strict mode so strings are never coerced from numbers
(or the other way around). Meal models expose the on-diet flag under its
wire name, ``isOnTheDiet``.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Users ---


class UserCreate(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    address: str
    # Bounded by the users.weight NUMERIC(5, 2) and users.height NUMERIC(3, 0) columns
    weight: float = Field(gt=0, lt=1000)
    height: int = Field(gt=0, lt=1000)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("email must not be blank")
        return value


# --- Meals ---


class MealBase(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True)

    name: str = Field(min_length=1)
    description: str
    is_on_the_diet: bool = Field(alias="isOnTheDiet")


class MealCreate(MealBase):
    pass


class MealUpdate(MealBase):
    pass


class MealRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    user_id: UUID
    name: str
    description: str
    is_on_the_diet: bool = Field(alias="isOnTheDiet")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MealResponse(BaseModel):
    meal: MealRead


class MealListResponse(BaseModel):
    meals: list[MealRead]


class MealSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_meals: int = Field(alias="totalMeals")
    meals_on_diet: int = Field(alias="mealsOnDiet")
    meals_off_diet: int = Field(alias="mealsOffDiet")


class MealSummaryResponse(BaseModel):
    summary: MealSummary
