from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sex(str, Enum):
    male = "male"
    female = "female"


class Goal(str, Enum):
    cut = "cut"
    maintain = "maintain"
    bulk = "bulk"


class UserProfile(BaseModel):
    """Body metrics for one plan request; metric units only.

    Bounds keep every value finite before it reaches the energy formula.
    """

    gender: Sex | None = None
    age: int = Field(..., gt=0, lt=150, strict=True, description="years")
    height: float = Field(..., gt=0, lt=300, allow_inf_nan=False, description="centimeters")
    weight: float = Field(..., gt=0, lt=1000, allow_inf_nan=False, description="kilograms")
    body_fat: float | None = Field(None, ge=0, le=100, allow_inf_nan=False, alias="bodyFat")
    goal: Goal | None = None
    allergies: str | None = None

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)
