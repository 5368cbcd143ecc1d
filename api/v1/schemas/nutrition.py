# api/v1/schemas/nutrition.py
from __future__ import annotations

from pydantic import BaseModel

from core.models.plan import MealPlan
from core.models.profile import UserProfile


class PlanRequest(UserProfile):
    """POST body – same fields as the profile, JSON keys as sent by the form."""


class PlanResponse(BaseModel):
    plan: MealPlan


class ErrorResponse(BaseModel):
    error: str
