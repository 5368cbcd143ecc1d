# tests/test_nutrition_calc.py
from __future__ import annotations

import math
import pytest

from core.nutrition_calc import (
    calorie_range,
    cm_to_inches,
    estimated_metabolic_rate,
    estimated_metabolic_rate_imperial,
    feet_inches_to_inches,
    inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
    round_half_up,
)

# ── estimated metabolic rate ────────────────────────────────────────
def test_rate_male_branch():
    expected = (66 + 6.23 * 180 + 12.7 * 70 - 6.8 * 30) * 1.5
    assert math.isclose(estimated_metabolic_rate_imperial("male", 180, 70, 30), expected)


def test_rate_female_branch():
    expected = (655 + 4.35 * 140 + 4.7 * 65 - 4.7 * 28) * 1.5
    assert math.isclose(estimated_metabolic_rate_imperial("female", 140, 65, 28), expected)


def test_rate_metric_converts_to_imperial():
    expected = estimated_metabolic_rate_imperial("male", 80 * 2.20462, 180 / 2.54, 40)
    assert math.isclose(estimated_metabolic_rate("male", 80, 180, 40), expected)


def test_rate_is_scaled_by_activity_multiplier():
    base = 66 + 6.23 * 150 + 12.7 * 68 - 6.8 * 25
    assert math.isclose(estimated_metabolic_rate_imperial("male", 150, 68, 25) / base, 1.5)


@pytest.mark.parametrize("gender", ["male", "female"])
def test_rate_monotonic(gender):
    ref = estimated_metabolic_rate(gender, 70, 175, 30)
    assert estimated_metabolic_rate(gender, 75, 175, 30) > ref
    assert estimated_metabolic_rate(gender, 70, 180, 30) > ref
    assert estimated_metabolic_rate(gender, 70, 175, 35) < ref


# ── calorie range ───────────────────────────────────────────────────
def test_range_cut():
    rng = calorie_range(2500, "cut")
    assert (rng.low, rng.high) == (2000, 2150)


def test_range_bulk():
    rng = calorie_range(2500, "bulk")
    assert (rng.low, rng.high) == (2700, 3000)


@pytest.mark.parametrize("goal", ["maintain", None, "whatever"])
def test_range_collapses_to_rate(goal):
    rng = calorie_range(2412.6, goal)
    assert rng.low == rng.high == 2412.6
    assert rng.display == (2413, 2413)


# ── conversion / rounding ───────────────────────────────────────────
def test_unit_conversion():
    assert feet_inches_to_inches(5, 10) == 70
    assert math.isclose(inches_to_cm(70), 177.8)
    assert math.isclose(cm_to_inches(177.8), 70)
    assert math.isclose(lbs_to_kg(100), 45.3592)
    assert math.isclose(kg_to_lbs(100), 220.462)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-1.5) == -1
    assert round_half_up(1999.4) == 1999
