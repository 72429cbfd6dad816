"""Error Handling System

Type-safe error values shared by the validation engine.

Key components:
- Result[T, E]: container for success/failure
- AppError: error value with code, message and context
- ErrorCode: hierarchical error code taxonomy
- RuleDefinitionError: raised when rules are declared with bad arguments

Usage:
    from fieldrules.errors import Ok, Err, Result, AppError

    match coerce_text(value):
        case Ok(text):
            ...
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    from_exception,
    try_result,
)

from .builders import (
    validation_error,
    invalid_type,
    invalid_input_shape,
)

from .exceptions import RuleDefinitionError

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    "try_result",
    "validation_error",
    "invalid_type",
    "invalid_input_shape",
    "RuleDefinitionError",
]
