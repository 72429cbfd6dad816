"""Rule Checkers

One pure function per rule kind. Each takes the field name, the rule's
parameter(s) and the field's value, and returns a ``CheckResult`` holding
the verdict and the default message for that rule instance. The default
message is returned on success too, so callers never branch to build it.

Null handling: every checker except ``required`` fails on ``None``.
Values of the wrong shape fail with ``incompatible_type_message``.

String lengths are measured in UTF-8 bytes, so "Lagös" is 6 long.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, TypeVar

from fieldrules.errors import AppError, ErrorCode, Err, Ok, Result
from .coercion import coerce_boolean, coerce_integer, coerce_text
from .rules import (
    Bool, Contains, Email, Length, LengthRange, MaxLength, MaxSize, MinLength,
    MinSize, Password, Required, Rule, Size, SizeRange,
)

T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


class Bound(str, Enum):
    """Comparison applied by length and size checkers."""
    EXACT = "exactly"
    MAX = "maximum of"
    MIN = "minimum of"

    def holds(self, actual: int, limit: int) -> bool:
        if self is Bound.MAX:
            return actual <= limit
        if self is Bound.MIN:
            return actual >= limit
        return actual == limit


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Verdict of one checker call plus its default message."""
    passed: bool
    message: str
    code: ErrorCode | None = None

    @classmethod
    def of(cls, passed: bool, message: str, code: ErrorCode) -> CheckResult:
        return cls(passed=passed, message=message, code=None if passed else code)

    @classmethod
    def incompatible(cls, field: str) -> CheckResult:
        return cls(
            passed=False,
            message=incompatible_type_message(field),
            code=ErrorCode.E2004_INVALID_TYPE,
        )


def incompatible_type_message(field: str) -> str:
    return f"{field} has an incompatible type for this rule"


def text_length(text: str) -> int:
    """Length of ``text`` in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def _narrow(
    field: str,
    value: Any,
    coercer: Callable[[Any], Result[T, AppError]],
    message: str,
    code: ErrorCode,
    verdict: Callable[[T], bool],
) -> CheckResult:
    """Shared null-check, coercion and verdict step for shape-sensitive checkers."""
    if value is None:
        return CheckResult.of(False, message, code)
    match coercer(value):
        case Ok(narrowed):
            return CheckResult.of(verdict(narrowed), message, code)
        case Err():
            return CheckResult.incompatible(field)


# ============================================================================
# Checkers
# ============================================================================

def length(field: str, limit: int, value: Any, bound: Bound) -> CheckResult:
    """Compare a string's length against ``limit``."""
    return _narrow(
        field,
        value,
        coerce_text,
        f"'{field}' field must be {bound.value} {limit} characters.",
        ErrorCode.E2003_OUT_OF_RANGE,
        lambda text: bound.holds(text_length(text), limit),
    )


def size(field: str, limit: int, value: Any, bound: Bound) -> CheckResult:
    """Compare an integer against ``limit``."""
    return _narrow(
        field,
        value,
        coerce_integer,
        f"'{field}' field must be {bound.value} {limit}.",
        ErrorCode.E2003_OUT_OF_RANGE,
        lambda number: bound.holds(number, limit),
    )


def required(field: str, value: Any) -> CheckResult:
    return CheckResult.of(
        value is not None,
        f"'{field}' field cannot be null.",
        ErrorCode.E2001_REQUIRED_FIELD_MISSING,
    )


def check_bool(field: str, value: Any) -> CheckResult:
    return _narrow(
        field,
        value,
        coerce_boolean,
        f"'{field}' field's condition must be satisfied.",
        ErrorCode.E2005_CONSTRAINT_VIOLATION,
        lambda flag: flag is True,
    )


def is_strong_password(text: str, min_length: int) -> bool:
    """Upper, lower, digit and symbol present, no whitespace, long enough."""
    has_upper = has_lower = has_digit = has_special = False
    for char in text:
        if char.isspace():
            return False
        has_upper |= char.isupper()
        has_lower |= char.islower()
        has_digit |= char.isdigit()
        has_special |= not char.isalnum()
    return has_upper and has_lower and has_digit and has_special and text_length(text) >= min_length


def password(field: str, value: Any, min_length: int) -> CheckResult:
    message = (
        f"'{field}' field must contain at least one uppercase letter, one lowercase letter, "
        f"one digit and one special character and must be at least {min_length} chars long."
    )
    return _narrow(
        field,
        value,
        coerce_text,
        message,
        ErrorCode.E2013_WEAK_PASSWORD,
        lambda text: is_strong_password(text, min_length),
    )


def email(field: str, value: Any) -> CheckResult:
    return _narrow(
        field,
        value,
        coerce_text,
        f"'{field}' field must be a valid email address.",
        ErrorCode.E2010_INVALID_EMAIL,
        lambda text: EMAIL_PATTERN.fullmatch(text) is not None,
    )


def length_range(field: str, value: Any, low: int, high: int) -> CheckResult:
    """Exclusive on both ends."""
    return _narrow(
        field,
        value,
        coerce_text,
        f"'{field}' field must be between {low} and {high} characters long (exclusive).",
        ErrorCode.E2003_OUT_OF_RANGE,
        lambda text: low < text_length(text) < high,
    )


def size_range(field: str, value: Any, low: int, high: int) -> CheckResult:
    """Exclusive on both ends."""
    return _narrow(
        field,
        value,
        coerce_integer,
        f"'{field}' field must be between {low} and {high} (exclusive).",
        ErrorCode.E2003_OUT_OF_RANGE,
        lambda number: low < number < high,
    )


def contains(field: str, substring: str, value: Any) -> CheckResult:
    return _narrow(
        field,
        value,
        coerce_text,
        f"'{field}' field must contain '{substring}'.",
        ErrorCode.E2005_CONSTRAINT_VIOLATION,
        lambda text: substring in text,
    )


# ============================================================================
# Dispatch
# ============================================================================

def check(field: str, rule: Rule, value: Any) -> CheckResult:
    """Run the checker selected by ``rule``'s kind."""
    match rule:
        case Length(n):
            return length(field, n, value, Bound.EXACT)
        case MaxLength(n):
            return length(field, n, value, Bound.MAX)
        case MinLength(n):
            return length(field, n, value, Bound.MIN)
        case Size(n):
            return size(field, n, value, Bound.EXACT)
        case MaxSize(n):
            return size(field, n, value, Bound.MAX)
        case MinSize(n):
            return size(field, n, value, Bound.MIN)
        case Bool():
            return check_bool(field, value)
        case Password(min_length):
            return password(field, value, min_length)
        case Required():
            return required(field, value)
        case Email():
            return email(field, value)
        case LengthRange(low, high):
            return length_range(field, value, low, high)
        case SizeRange(low, high):
            return size_range(field, value, low, high)
        case Contains(substring):
            return contains(field, substring, value)
    raise TypeError(f"Unsupported rule: {rule!r}")
