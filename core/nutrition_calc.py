"""
core/nutrition_calc.py
────────────────────────────────────────────────────────────────────────
Local energy maths shared by the form client and the plan handler:

1. Unit conversion (imperial ⇄ metric)
2. Estimated metabolic rate (Harris–Benedict, imperial form, × 1.5 activity)
3. Goal-dependent calorie range for the generated plan
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

Logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIER = 1.5

LBS_PER_KG = 2.20462
KG_PER_LB = 0.453592
CM_PER_INCH = 2.54

# (low offset, high offset) applied to the estimated rate
_GOAL_OFFSETS: dict[str, tuple[float, float]] = {
    "cut":  (-500, -350),
    "bulk": (200, 500),
}


# ──────────────────────────────────────────────────────────────────────
#  Unit conversion
# ──────────────────────────────────────────────────────────────────────
def feet_inches_to_inches(feet: float, inches: float) -> float:
    return feet * 12 + inches


def inches_to_cm(inches: float) -> float:
    return inches * CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    return cm / CM_PER_INCH


def lbs_to_kg(lbs: float) -> float:
    return lbs * KG_PER_LB


def kg_to_lbs(kg: float) -> float:
    return kg * LBS_PER_KG


def round_half_up(value: float) -> int:
    """Whole-number display rounding; halves go up (1.5 → 2, -1.5 → -1)."""
    return math.floor(value + 0.5)


# ──────────────────────────────────────────────────────────────────────
#  Estimated metabolic rate
# ──────────────────────────────────────────────────────────────────────
def estimated_metabolic_rate_imperial(
    gender: str, weight_lbs: float, height_in: float, age: float
) -> float:
    """Harris–Benedict on pounds / inches, scaled by the activity multiplier.

    Anything other than ``"male"`` takes the female branch.
    """
    if gender == "male":
        base = 66 + 6.23 * weight_lbs + 12.7 * height_in - 6.8 * age
    else:
        base = 655 + 4.35 * weight_lbs + 4.7 * height_in - 4.7 * age
    return base * ACTIVITY_MULTIPLIER


def estimated_metabolic_rate(
    gender: str, weight_kg: float, height_cm: float, age: float
) -> float:
    return estimated_metabolic_rate_imperial(
        gender, kg_to_lbs(weight_kg), cm_to_inches(height_cm), age
    )


# ──────────────────────────────────────────────────────────────────────
#  Calorie range
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class CalorieRange:
    low: float
    high: float

    @property
    def display(self) -> tuple[int, int]:
        return round_half_up(self.low), round_half_up(self.high)


def calorie_range(bmr: float, goal: str | None) -> CalorieRange:
    """cut → [bmr-500, bmr-350], bulk → [bmr+200, bmr+500], else the point bmr."""
    lo, hi = _GOAL_OFFSETS.get(goal or "", (0, 0))
    rng = CalorieRange(bmr + lo, bmr + hi)
    Logger.debug("calorie range for goal=%s: %.1f–%.1f", goal, rng.low, rng.high)
    return rng
