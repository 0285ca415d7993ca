"""Validation errors raised before any scoring runs."""

from __future__ import annotations


class CEIValidationError(ValueError):
    """Base class for rejected CEI inputs."""

    def as_dict(self) -> dict[str, str]:
        return {"error": str(self)}


class InvalidUnitError(CEIValidationError):
    """Raised when the unit selector is not metric, imperial or standard."""

    def __init__(self, unit: object) -> None:
        super().__init__(f"Invalid unit type: {unit}")
        self.unit = unit


class MissingFieldError(CEIValidationError):
    """Raised when a required field is absent or not a finite number."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing or invalid field: {field}")
        self.field = field
