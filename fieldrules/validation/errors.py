"""Validation Error Accumulation

Failures are folded per field in evaluation order. Accumulation is always
collect-all: every failing binding contributes exactly one detail and
nothing stops evaluation early.

Serialized form:
{
    "error": {
        "type": "validation_error",
        "message": "Validation failed",
        "error_count": 2,
        "errors": {
            "bio": ["'bio' field cannot be null.", "Bio is too short!"]
        }
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fieldrules.errors import ErrorCode

ROOT_FIELD = "$"


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """One failed binding.

    - field: field name the rule was declared for, or ``$`` for the record itself
    - constraint: the rule's constraint name (e.g. ``min_length[12]``)
    - message: the custom message if one was bound, else the checker default
    - custom: whether ``message`` came from the declaration
    """
    field: str
    constraint: str
    message: str
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC
    custom: bool = False


@dataclass
class ErrorAccumulator:
    """Collects failure details and groups their messages by field."""
    _details: list[ValidationErrorDetail] = field(default_factory=list)

    def add_failure(
        self,
        field: str,
        constraint: str,
        default_message: str,
        custom_message: str | None,
        code: ErrorCode | None = None,
    ) -> ValidationErrorDetail:
        """Record a failed binding; a custom message replaces the default, never joins it."""
        detail = ValidationErrorDetail(
            field=field,
            constraint=constraint,
            message=default_message if custom_message is None else custom_message,
            code=code or ErrorCode.E2000_VALIDATION_GENERIC,
            custom=custom_message is not None,
        )
        self._details.append(detail)
        return detail

    def has_errors(self) -> bool:
        return bool(self._details)

    @property
    def details(self) -> tuple[ValidationErrorDetail, ...]:
        return tuple(self._details)

    def field_errors(self) -> dict[str, list[str]]:
        """Messages grouped by field; fields and messages keep evaluation order."""
        grouped: dict[str, list[str]] = {}
        for detail in self._details:
            grouped.setdefault(detail.field, []).append(detail.message)
        return grouped


@dataclass
class ValidationError(Exception):
    """Raised on request by callers that prefer exceptions to outcomes."""
    message: str
    errors: dict[str, list[str]]
    details: tuple[ValidationErrorDetail, ...] = ()

    def __post_init__(self):
        Exception.__init__(self, self.message)

    @property
    def error_count(self) -> int:
        return sum(len(messages) for messages in self.errors.values())

    def __str__(self) -> str:
        if self.error_count == 1:
            name, messages = next(iter(self.errors.items()))
            return f"{name}: {messages[0]}"
        return f"{self.message} ({self.error_count} errors)"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for API responses."""
        return {
            "error": {
                "type": "validation_error",
                "message": self.message,
                "error_count": self.error_count,
                "errors": self.errors,
            }
        }
