"""Declarative Field Validation

Rules are declared per field, evaluated against any record that can be
viewed as a string-keyed object, and folded into a per-field error map.

Key Features:
- Closed rule family checked at construction
- One pure checker per rule kind, dispatched by a single match
- Explicit, fallible shape coercion (wrong types fail, never raise)
- Collect-all error accumulation, custom messages replace defaults
- Any pydantic-serializable record as input

Usage:
    from fieldrules.validation import Validator, declare, Length, MinSize

    outcome = Validator(user, [
        declare("name", Length(12)),
        declare("age", MinSize(18), "You're under-aged!"),
    ]).validate()
    if not outcome:
        return outcome.to_dict()
"""

from .rules import (
    Rule,
    Length,
    MaxLength,
    MinLength,
    LengthRange,
    Size,
    MaxSize,
    MinSize,
    SizeRange,
    SizeExact,
    SizeMax,
    SizeMin,
    Required,
    Bool,
    Password,
    Email,
    Contains,
    RuleBinding,
    FieldDeclaration,
    declare,
)

from .checkers import (
    Bound,
    CheckResult,
    check,
    incompatible_type_message,
)

from .coercion import (
    CoercionRule,
    ToText,
    ToInteger,
    ToBoolean,
    ExplicitCoercion,
    DEFAULT_COERCER,
)

from .errors import (
    ROOT_FIELD,
    ValidationErrorDetail,
    ErrorAccumulator,
    ValidationError,
)

from .outcome import ValidationOutcome

from .view import to_object, to_value

from .validator import (
    NON_OBJECT_MESSAGE,
    ValidationConfig,
    Validator,
    validate,
)

__all__ = [
    # Rules
    "Rule",
    "Length",
    "MaxLength",
    "MinLength",
    "LengthRange",
    "Size",
    "MaxSize",
    "MinSize",
    "SizeRange",
    "SizeExact",
    "SizeMax",
    "SizeMin",
    "Required",
    "Bool",
    "Password",
    "Email",
    "Contains",
    "RuleBinding",
    "FieldDeclaration",
    "declare",
    # Checkers
    "Bound",
    "CheckResult",
    "check",
    "incompatible_type_message",
    # Coercion
    "CoercionRule",
    "ToText",
    "ToInteger",
    "ToBoolean",
    "ExplicitCoercion",
    "DEFAULT_COERCER",
    # Errors
    "ROOT_FIELD",
    "ValidationErrorDetail",
    "ErrorAccumulator",
    "ValidationError",
    # Outcome
    "ValidationOutcome",
    # View
    "to_object",
    "to_value",
    # Validator
    "NON_OBJECT_MESSAGE",
    "ValidationConfig",
    "Validator",
    "validate",
]
