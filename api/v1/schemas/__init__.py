"""Re-export individual schema modules for easy imports."""

from .nutrition import ErrorResponse, PlanRequest, PlanResponse

__all__ = [
    "PlanRequest",
    "PlanResponse",
    "ErrorResponse",
]
