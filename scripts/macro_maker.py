"""
Fill in the Macro Maker form from the command line and print the plan.

Usage
-----

    # imperial form (default)
    python -m scripts.macro_maker --age 30 --height-ft 5 --height-in 10 --weight-lbs 180

    # metric form
    python -m scripts.macro_maker --metric --age 30 --height-cm 178 --weight-kg 82 --goal bulk
"""
from __future__ import annotations

import argparse
import sys

from client.form import FormState, PlanForm, PlanFormClient, render_plan
from core.nutrition_calc import round_half_up


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Get a generated daily meal plan")
    p.add_argument("--url", default="http://127.0.0.1:8000", help="API base URL")
    p.add_argument("--metric", action="store_true", help="enter cm / kg instead of ft, in / lbs")
    p.add_argument("--gender", choices=["male", "female"], default="male")
    p.add_argument("--age")
    p.add_argument("--height-ft")
    p.add_argument("--height-in")
    p.add_argument("--weight-lbs")
    p.add_argument("--height-cm")
    p.add_argument("--weight-kg")
    p.add_argument("--body-fat")
    p.add_argument("--goal", choices=["cut", "maintain", "bulk"], default="cut")
    p.add_argument("--allergies", default="")
    return p


def _progress(state: FormState) -> None:
    if state.loading:
        print("Generating...", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    form = PlanForm("metric" if args.metric else "imperial")

    for name in form.values:
        value = getattr(args, name, None)
        if value is not None:
            form.set(name, value)

    state = PlanFormClient(args.url, on_change=_progress).submit(form)

    if state.bmr is not None:
        print(f"Maintenance: {round_half_up(state.bmr)} kcal/day\n")
    if state.error:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1
    print(render_plan(state.plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())
