"""Validation Outcome

The single artifact a validation run produces: an overall flag and the
per-field error messages, in rule evaluation order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fieldrules.errors import Err, Ok, Result
from .errors import ErrorAccumulator, ValidationError, ValidationErrorDetail


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Aggregated result of one ``Validator.validate`` call.

    A field missing from ``errors`` had no failing bindings.
    """
    passed: bool
    errors: dict[str, list[str]] = field(default_factory=dict)
    details: tuple[ValidationErrorDetail, ...] = ()

    @classmethod
    def from_accumulator(cls, accumulator: ErrorAccumulator) -> ValidationOutcome:
        return cls(
            passed=not accumulator.has_errors(),
            errors=accumulator.field_errors(),
            details=accumulator.details,
        )

    def __bool__(self) -> bool:
        return self.passed

    @property
    def failed(self) -> bool:
        return not self.passed

    @property
    def error_count(self) -> int:
        return len(self.details)

    @property
    def fields(self) -> list[str]:
        """Names of fields with at least one error."""
        return list(self.errors)

    def errors_for(self, field: str) -> list[str]:
        return list(self.errors.get(field, []))

    def to_error(self, message: str = "Validation failed") -> ValidationError | None:
        if self.passed:
            return None
        return ValidationError(
            message=message,
            errors={name: list(messages) for name, messages in self.errors.items()},
            details=self.details,
        )

    def to_result(self) -> Result[None, ValidationError]:
        """``Ok(None)`` when every rule passed, else ``Err`` with the grouped errors."""
        error = self.to_error()
        return Ok(None) if error is None else Err(error)

    def raise_if_failed(self, message: str = "Validation failed") -> None:
        if (error := self.to_error(message)) is not None:
            raise error

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        if self.passed:
            return {"valid": True}
        return {"valid": False, "error_count": self.error_count, "errors": self.errors}
