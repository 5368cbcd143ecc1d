"""
core/plan_parser.py
────────────────────────────────────────────────────────────────────────
Turn the model's free text into a `MealPlan`.

Two attempts, always in this order:

1. decode the whole (trimmed) reply as JSON;
2. decode the first greedy `{ … }` span – first "{" to last "}".

Whatever decodes must then match `MealPlan` exactly.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from core.errors import InvalidPlanOutput
from core.models.plan import MealPlan

Logger = logging.getLogger(__name__)

_BRACED = re.compile(r"\{[\s\S]*\}")


def extract_json(raw: str) -> Any:
    text = raw.strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    match = _BRACED.search(text)
    if not match:
        raise InvalidPlanOutput("Invalid JSON from AI")
    Logger.debug("direct parse failed, using embedded object at %d", match.start())
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise InvalidPlanOutput("Invalid JSON from AI") from exc


def parse_meal_plan(raw: str) -> MealPlan:
    data = extract_json(raw)
    try:
        return MealPlan.model_validate(data)
    except ValidationError as exc:
        Logger.warning("model output has the wrong shape: %s", exc.errors())
        raise InvalidPlanOutput("Invalid meal plan from AI") from exc
