"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Failures raised while producing a meal plan. The endpoint turns every one
of them (and any upstream `httpx.HTTPError`) into a 500 with `str(exc)`.
"""


class PlanError(Exception):
    pass


class ConfigurationError(PlanError):
    """A required setting (the API credential) is missing."""


class InvalidPlanOutput(PlanError):
    """The model's reply is not a usable meal plan."""
