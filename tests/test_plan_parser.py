"""
Two-stage parsing of model output: direct JSON first, embedded object second.
"""
import pytest

from core.errors import InvalidPlanOutput
from core.models.plan import MealPlan
from core.plan_parser import extract_json, parse_meal_plan


def test_direct_parse():
    plan = parse_meal_plan('{"meals":["A","B"],"calories":2000,"protein":150}')
    assert plan.model_dump() == {"meals": ["A", "B"], "calories": 2000, "protein": 150}


def test_direct_parse_trims_whitespace():
    plan = parse_meal_plan('\n  {"meals":[],"calories":1,"protein":2}  \n')
    assert plan.calories == 1


def test_embedded_object_fallback():
    raw = 'Here is your plan: {"meals":["A"],"calories":1800,"protein":140} Enjoy!'
    plan = parse_meal_plan(raw)
    assert plan.model_dump() == {"meals": ["A"], "calories": 1800, "protein": 140}


def test_code_fenced_reply_uses_fallback():
    raw = '```json\n{"meals":["Oats"],"calories":500,"protein":20}\n```'
    assert parse_meal_plan(raw).meals == ["Oats"]


def test_no_braces_is_invalid_json():
    with pytest.raises(InvalidPlanOutput, match="Invalid JSON from AI"):
        parse_meal_plan("Sorry, I cannot help with that.")


def test_empty_reply_is_invalid_json():
    with pytest.raises(InvalidPlanOutput, match="Invalid JSON from AI"):
        parse_meal_plan("")


def test_greedy_match_spans_first_to_last_brace():
    # two objects → "{...} and {...}" is captured and does not decode
    raw = 'a {"x": 1} and {"y": 2} b'
    with pytest.raises(InvalidPlanOutput, match="Invalid JSON from AI"):
        extract_json(raw)


def test_nested_braces_captured_whole():
    raw = 'plan: {"meals":["A"],"calories":1,"protein":2,"extra":{"k":1}} done'
    assert extract_json(raw)["extra"] == {"k": 1}


def test_extra_key_rejected():
    with pytest.raises(InvalidPlanOutput, match="Invalid meal plan from AI"):
        parse_meal_plan('{"meals":["A"],"calories":1,"protein":2,"fat":3}')


def test_missing_key_rejected():
    with pytest.raises(InvalidPlanOutput, match="Invalid meal plan from AI"):
        parse_meal_plan('{"meals":["A"],"calories":1}')


@pytest.mark.parametrize(
    "raw",
    [
        '{"meals":["A"],"calories":"2000","protein":150}',
        '{"meals":["A"],"calories":2000,"protein":true}',
        '{"meals":["A"],"calories":2000.5,"protein":150}',
        '{"meals":[1, 2],"calories":2000,"protein":150}',
    ],
)
def test_values_are_not_coerced(raw):
    with pytest.raises(InvalidPlanOutput, match="Invalid meal plan from AI"):
        parse_meal_plan(raw)


def test_serialised_plan_parses_back_identically():
    plan = MealPlan(meals=["Eggs & toast", "Chicken, rice"], calories=2100, protein=160)
    assert parse_meal_plan(plan.model_dump_json()) == plan
