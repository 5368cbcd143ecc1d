"""
client/form.py
────────────────────────────────────────────────────────────────────────
Form-side half of Macro Maker.

`PlanForm` holds raw field values (strings, as typed), validates them,
converts imperial input to metric and computes the maintenance estimate.
`PlanFormClient.submit()` sends one POST per submission and returns the
resulting `FormState`; nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal

import httpx
from pydantic import ValidationError

from core.models.plan import MealPlan
from core.nutrition_calc import (
    cm_to_inches,
    estimated_metabolic_rate_imperial,
    feet_inches_to_inches,
    inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
)

Logger = logging.getLogger(__name__)

UnitMode = Literal["imperial", "metric"]

NUTRITION_PATH = "/api/v1/nutrition"

_SHARED_FIELDS = ("gender", "age", "body_fat", "goal", "allergies")
_UNIT_FIELDS: dict[str, tuple[str, ...]] = {
    "imperial": ("height_ft", "height_in", "weight_lbs"),
    "metric": ("height_cm", "weight_kg"),
}
_DEFAULTS = {"gender": "male", "goal": "cut"}


class FormError(ValueError):
    """Input that cannot be submitted."""


@dataclass(frozen=True)
class ValidatedInput:
    gender: str
    age: int
    height_cm: float
    weight_kg: float
    height_in: float
    weight_lbs: float
    body_fat: float | None
    goal: str
    allergies: str

    def payload(self) -> dict[str, Any]:
        return {
            "gender": self.gender,
            "age": self.age,
            "height": self.height_cm,
            "weight": self.weight_kg,
            "bodyFat": self.body_fat,
            "goal": self.goal,
            "allergies": self.allergies,
        }


@dataclass
class FormState:
    plan: MealPlan | None = None
    bmr: float | None = None
    error: str | None = None
    loading: bool = False


# ───────────────────────── helpers ──────────────────────────
def _number(name: str, raw: str, *, required: bool = True) -> float | None:
    text = (raw or "").strip()
    if not text:
        if required:
            raise FormError(f"{name} is required")
        return None
    try:
        return float(text)
    except ValueError:
        raise FormError(f"{name} must be a number") from None


def _positive(name: str, value: float | None) -> float:
    if value is None or value <= 0:
        raise FormError(f"{name} must be greater than 0")
    return value


# ───────────────────────── form ─────────────────────────────
class PlanForm:
    def __init__(self, mode: UnitMode = "imperial") -> None:
        if mode not in _UNIT_FIELDS:
            raise ValueError(f"unknown unit mode: {mode!r}")
        self.mode = mode
        names = _SHARED_FIELDS + _UNIT_FIELDS[mode]
        self.values: dict[str, str] = {n: _DEFAULTS.get(n, "") for n in names}

    def set(self, name: str, value: Any) -> None:
        if name not in self.values:
            raise KeyError(f"{name!r} is not a field of the {self.mode} form")
        self.values[name] = "" if value is None else str(value)

    def update(self, **values: Any) -> "PlanForm":
        for name, value in values.items():
            self.set(name, value)
        return self

    def _height_weight(self) -> tuple[float, float, float, float]:
        """(cm, kg, inches, pounds) – entered units are kept as typed."""
        v = self.values
        if self.mode == "imperial":
            feet = _number("height (ft)", v["height_ft"])
            inches = _number("height (in)", v["height_in"], required=False) or 0.0
            total_in = _positive("height", feet_inches_to_inches(feet, inches))
            lbs = _positive("weight", _number("weight (lbs)", v["weight_lbs"]))
            return inches_to_cm(total_in), lbs_to_kg(lbs), total_in, lbs
        cm = _positive("height", _number("height (cm)", v["height_cm"]))
        kg = _positive("weight", _number("weight (kg)", v["weight_kg"]))
        return cm, kg, cm_to_inches(cm), kg_to_lbs(kg)

    def validate(self) -> ValidatedInput:
        v = self.values
        gender = v["gender"].strip().lower()
        if gender not in ("male", "female"):
            raise FormError("gender must be male or female")

        age = _positive("age", _number("age", v["age"]))
        if not age.is_integer():
            raise FormError("age must be a whole number")

        height_cm, weight_kg, height_in, weight_lbs = self._height_weight()

        body_fat = _number("body fat", v["body_fat"], required=False)
        if body_fat is not None and not 0 <= body_fat <= 100:
            raise FormError("body fat must be between 0 and 100")

        goal = v["goal"].strip().lower() or "maintain"
        if goal not in ("cut", "maintain", "bulk"):
            raise FormError("goal must be cut, maintain or bulk")

        return ValidatedInput(
            gender=gender,
            age=int(age),
            height_cm=height_cm,
            weight_kg=weight_kg,
            height_in=height_in,
            weight_lbs=weight_lbs,
            body_fat=body_fat,
            goal=goal,
            allergies=v["allergies"].strip(),
        )


def maintenance_kcal(data: ValidatedInput) -> float:
    return estimated_metabolic_rate_imperial(data.gender, data.weight_lbs, data.height_in, data.age)


# ───────────────────────── submission ───────────────────────
class PlanFormClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        transport: httpx.BaseTransport | None = None,
        timeout: float | None = None,
        on_change: Callable[[FormState], None] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._transport = transport
        self._timeout = timeout
        self._on_change = on_change
        self.state = FormState()

    def _changed(self) -> FormState:
        if self._on_change is not None:
            self._on_change(self.state)
        return self.state

    def submit(self, form: PlanForm) -> FormState:
        """Validate, compute the estimate, POST once, record the outcome.

        `on_change` sees the state when the request goes out (`loading` is
        True) and once more when it settles.
        """
        self.state = FormState()
        try:
            data = form.validate()
        except FormError as exc:
            self.state.error = str(exc)
            return self._changed()

        self.state.bmr = maintenance_kcal(data)
        self.state.loading = True
        self._changed()
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as http:
                r = http.post(self.base_url + NUTRITION_PATH, json=data.payload())
            body = r.json()
        except (httpx.HTTPError, ValueError) as exc:
            Logger.error("could not reach the plan endpoint: %s", exc)
            self.state.loading = False
            self.state.error = str(exc) or exc.__class__.__name__
            return self._changed()
        self.state.loading = False

        if isinstance(body, dict) and body.get("plan"):
            try:
                self.state.plan = MealPlan.model_validate(body["plan"])
            except ValidationError:
                Logger.error("malformed plan in response: %r", body["plan"])
                self.state.error = "Malformed meal plan in response"
        else:
            err = body.get("error") if isinstance(body, dict) else None
            self.state.error = err or f"Request failed ({r.status_code})"
        return self._changed()


# ───────────────────────── rendering ────────────────────────
def render_plan(plan: MealPlan) -> str:
    lines = ["Daily Meal Plan", ""]
    lines += [f"  • {meal}" for meal in plan.meals]
    lines += [
        "",
        f"Total Calories: {plan.calories}",
        f"Total Protein: {plan.protein}g",
    ]
    return "\n".join(lines)
