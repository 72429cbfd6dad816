"""Validation Error Builders

Ergonomic constructors for the validation error codes used by the
value view and coercion layer.
"""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_type(value: Any, expected: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Cannot coerce {type(value).__name__} to {expected}",
        code=ErrorCode.E2004_INVALID_TYPE,
        origin=origin,
        source_type=type(value).__name__,
        target_type=expected,
    )


def invalid_input_shape(actual: Any, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Expected an object-shaped record, got {type(actual).__name__}",
        code=ErrorCode.E2007_INVALID_INPUT_SHAPE,
        origin=origin,
        actual_type=type(actual).__name__,
    )
