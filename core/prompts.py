"""
core/prompts.py
────────────────────────────────────────────────────────────────────────
Builds the user message sent to the completion API.

Two modes (``PROMPT_MODE``):

* ``template`` – static instructions read from disk on every call, followed
  by the user's stats and the calorie range.
* ``inline``   – the full instruction text lives here, including the exact
  JSON shape, preferred ingredient groups and the meal-coherence rule.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.models.profile import UserProfile
from core.nutrition_calc import CalorieRange, round_half_up

Logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a precise nutrition assistant."

PREFERRED_INGREDIENTS = [
    "lean proteins (chicken breast, turkey, fish, eggs, Greek yogurt, tofu)",
    "whole grains (oats, brown rice, quinoa, whole-wheat bread)",
    "vegetables (leafy greens, broccoli, peppers, carrots)",
    "fruit (berries, bananas, apples)",
    "healthy fats (olive oil, avocado, nuts, seeds)",
]

_INLINE_HEADER = """\
Create a one-day meal plan for the person described below.

Respond with ONLY a JSON object of exactly this shape and nothing else:
{"meals": ["<meal 1>", "<meal 2>", ...], "calories": <int>, "protein": <int>}

- "meals": one string per meal naming the food and portion sizes
- "calories": total kcal of the whole day, integer
- "protein": total grams of protein of the whole day, integer

Rules:
- Prefer these ingredient groups:
"""

_INLINE_RULES = """\
- The ingredients within a single meal must go together as one dish or plate;
  never combine foods that make no sense eaten together.
- Never use any ingredient the person is allergic to.
- No markdown, no code fences, no commentary."""


# ───────────────────────── pieces ────────────────────────────
def _fmt(value: float | None) -> str:
    if value is None:
        return "unknown"
    return f"{value:g}"


def stats_line(profile: UserProfile, bmr: float | None) -> str:
    parts = [
        f"Age {profile.age} yrs",
        f"Height {_fmt(profile.height)} cm",
        f"Weight {_fmt(profile.weight)} kg",
        f"Body fat {_fmt(profile.body_fat)}%",
    ]
    if bmr is not None:
        parts.append(f"BMR {round_half_up(bmr)} kcal/day")
    parts.append(f"Goal: {profile.goal or 'maintain'}")
    parts.append(f"Allergies: {profile.allergies or 'none'}")
    return "User stats: " + ", ".join(parts) + "."


def calorie_line(rng: CalorieRange | None) -> str:
    if rng is None:
        return ""
    low, high = rng.display
    return f"The total calories for the meal plan must be between {low} and {high} kcal."


# ───────────────────────── strategies ───────────────────────
def load_template(path: str | Path) -> str:
    # re-read every request so edits apply without a restart
    return Path(path).read_text(encoding="utf-8")


def template_prompt(
    template: str, profile: UserProfile, bmr: float | None, rng: CalorieRange | None
) -> str:
    prompt = template + "\n" + stats_line(profile, bmr)
    tail = calorie_line(rng)
    if tail:
        prompt += "\n" + tail
    return prompt


def inline_prompt(
    profile: UserProfile, bmr: float | None, rng: CalorieRange | None
) -> str:
    lines = [_INLINE_HEADER.rstrip("\n")]
    lines += [f"  * {group}" for group in PREFERRED_INGREDIENTS]
    lines.append(_INLINE_RULES)
    lines.append("")
    lines.append(stats_line(profile, bmr))
    tail = calorie_line(rng)
    if tail:
        lines.append(tail)
    return "\n".join(lines)


def build_prompt(
    mode: str,
    profile: UserProfile,
    bmr: float | None,
    rng: CalorieRange | None,
    template_path: str | Path | None = None,
) -> str:
    Logger.debug("building %s prompt", mode)
    if mode == "template":
        if template_path is None:
            raise ValueError("template mode needs a template path")
        return template_prompt(load_template(template_path), profile, bmr, rng)
    if mode == "inline":
        return inline_prompt(profile, bmr, rng)
    raise ValueError(f"unknown prompt mode: {mode!r}")
