"""Domain exceptions raised by the calculation and catalogue services.

Routers let these propagate; the handler registered in ``fitplan.main``
turns them into JSON error responses using ``status_code``.
"""

from typing import Any, Optional


class FitPlanError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(FitPlanError):
    """A numeric input cannot produce a meaningful result."""

    status_code = 422

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else None)


class TemplateNotFoundError(FitPlanError):
    """No plan template is authored for the requested goal."""

    status_code = 404

    def __init__(self, goal: str):
        self.goal = goal
        super().__init__(f"No plan template for goal '{goal}'", details={"goal": goal})


class NotFoundError(FitPlanError):
    status_code = 404

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            f"{resource} with id '{identifier}' not found",
            details={"resource": resource, "id": identifier},
        )
