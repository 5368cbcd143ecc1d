"""
core/meal_planner.py
────────────────────────────────────────────────────────────────────────
Request pipeline: credential check → rate + range → prompt → one
completion call → parse. Nothing is kept between calls.
"""

from __future__ import annotations

import logging

from config import Settings
from core.errors import ConfigurationError
from core.models.plan import MealPlan
from core.models.profile import UserProfile
from core.nutrition_calc import CalorieRange, calorie_range, estimated_metabolic_rate
from core.plan_parser import parse_meal_plan
from core.prompts import SYSTEM_PROMPT, build_prompt
from services.openai_chat import ChatCompletionClient

Logger = logging.getLogger(__name__)


def energy_targets(profile: UserProfile) -> tuple[float | None, CalorieRange | None]:
    """Estimated rate and calorie range; both None when gender is unknown."""
    if profile.gender is None:
        return None, None
    bmr = estimated_metabolic_rate(profile.gender, profile.weight, profile.height, profile.age)
    return bmr, calorie_range(bmr, profile.goal)


async def generate_plan(
    profile: UserProfile,
    settings: Settings,
    chat: ChatCompletionClient,
) -> MealPlan:
    if not settings.openai_key:
        raise ConfigurationError("Missing OPENAI_KEY")

    bmr, rng = energy_targets(profile)
    prompt = build_prompt(
        settings.prompt_mode,
        profile,
        bmr,
        rng,
        template_path=settings.prompt_template_path,
    )

    raw = await chat.complete(SYSTEM_PROMPT, prompt)
    plan = parse_meal_plan(raw)
    Logger.info("meal plan ready: %d meals, %d kcal", len(plan.meals), plan.calories)
    return plan
