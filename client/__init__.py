"""Form client for the meal-plan endpoint."""

from .form import (
    FormError,
    FormState,
    PlanForm,
    PlanFormClient,
    ValidatedInput,
    maintenance_kcal,
    render_plan,
)

__all__ = [
    "FormError",
    "FormState",
    "PlanForm",
    "PlanFormClient",
    "ValidatedInput",
    "maintenance_kcal",
    "render_plan",
]
