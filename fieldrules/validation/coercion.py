"""Explicit Shape Coercion

Checkers see dynamically-typed values from the value view. Before a
checker can compare lengths or sizes it must narrow the value to the
shape it expects. Narrowing is explicit and fallible: a value of the
wrong shape yields ``Err`` instead of raising, and the checker turns
that into an ordinary rule failure.

No lossy conversions are performed: "12" is not an int, 1 is not a bool.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from fieldrules.errors import AppError, ErrorCode, Err, Ok, Result, invalid_type

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CoercionRule(ABC, Generic[T]):
    """Base class for coercion rules.

    Each rule names the type it produces and narrows values to it.
    """

    @property
    @abstractmethod
    def target_type(self) -> type[T]:
        """Type this rule coerces to."""

    @abstractmethod
    def can_coerce(self, value: Any) -> bool:
        """Check if value can be coerced to target type."""

    @abstractmethod
    def coerce(self, value: Any) -> Result[T, AppError]:
        """Coerce value to target type."""


@dataclass(frozen=True, slots=True)
class ToText(CoercionRule[str]):
    """Accept strings only."""

    @property
    def target_type(self) -> type[str]:
        return str

    def can_coerce(self, value: Any) -> bool:
        return isinstance(value, str)

    def coerce(self, value: Any) -> Result[str, AppError]:
        if not self.can_coerce(value):
            return invalid_type(value, "str", origin="coercion")
        return Ok(value)


@dataclass(frozen=True, slots=True)
class ToInteger(CoercionRule[int]):
    """Accept integers, and floats with no fractional part.

    ``bool`` is rejected even though it subclasses ``int``.
    """

    @property
    def target_type(self) -> type[int]:
        return int

    def can_coerce(self, value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        return isinstance(value, float) and value.is_integer()

    def coerce(self, value: Any) -> Result[int, AppError]:
        if not self.can_coerce(value):
            if isinstance(value, float):
                return Err(AppError(
                    code=ErrorCode.E2002_INVALID_FORMAT,
                    message=f"Cannot coerce '{value}' to int: has a fractional part",
                    metadata={"value": value, "target": "int"},
                ))
            return invalid_type(value, "int", origin="coercion")
        return Ok(int(value))


@dataclass(frozen=True, slots=True)
class ToBoolean(CoercionRule[bool]):
    """Accept booleans only."""

    @property
    def target_type(self) -> type[bool]:
        return bool

    def can_coerce(self, value: Any) -> bool:
        return isinstance(value, bool)

    def coerce(self, value: Any) -> Result[bool, AppError]:
        if not self.can_coerce(value):
            return invalid_type(value, "bool", origin="coercion")
        return Ok(value)


@dataclass(frozen=True, slots=True)
class ExplicitCoercion:
    """Coercion registry keyed by target type.

    Usage:
        coercer = ExplicitCoercion()
        coercer.coerce("abc", str)   # Ok("abc")
        coercer.coerce(True, int)    # Err(AppError)
    """
    rules: tuple[CoercionRule, ...] = field(default_factory=lambda: (
        ToText(),
        ToInteger(),
        ToBoolean(),
    ))

    def coerce(self, value: Any, target_type: type[T]) -> Result[T, AppError]:
        for rule in self.rules:
            if rule.target_type is target_type:
                return rule.coerce(value)

        return Err(AppError(
            code=ErrorCode.E2004_INVALID_TYPE,
            message=f"No coercion rule targets {target_type.__name__}",
            metadata={"source_type": type(value).__name__, "target_type": target_type.__name__},
        ))


DEFAULT_COERCER = ExplicitCoercion()


def coerce_text(value: Any) -> Result[str, AppError]:
    return DEFAULT_COERCER.coerce(value, str)


def coerce_integer(value: Any) -> Result[int, AppError]:
    return DEFAULT_COERCER.coerce(value, int)


def coerce_boolean(value: Any) -> Result[bool, AppError]:
    return DEFAULT_COERCER.coerce(value, bool)
