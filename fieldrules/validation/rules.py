"""Rule Declaration Model

Rules form a closed family of frozen dataclasses, one per constraint kind.
Parameters are checked when a rule is built; a rule that exists is always
well-formed, so the evaluation loop never has to guard against bad
parameters.

Usage:
    name = declare("name", Length(12))
    bio = declare("bio", Required()).insert(MinLength(12), "Bio is too short!")
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator

from fieldrules.errors import RuleDefinitionError


def _require_int(rule: str, parameter: str, value: Any, *, non_negative: bool = False) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RuleDefinitionError(
            f"{rule}: {parameter} must be an integer, got {type(value).__name__}",
            rule=rule,
            parameter=parameter,
            value=value,
        )
    if non_negative and value < 0:
        raise RuleDefinitionError(
            f"{rule}: {parameter} cannot be negative, got {value}",
            rule=rule,
            parameter=parameter,
            value=value,
        )


class Rule(ABC):
    """Base class for every rule kind."""

    __slots__ = ()

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Stable constraint identifier for error details and logs."""

    def __str__(self) -> str:
        return self.constraint_name


# ============================================================================
# String length rules
# ============================================================================

@dataclass(frozen=True, slots=True)
class Length(Rule):
    """String must be exactly ``length`` characters."""
    length: int

    def __post_init__(self) -> None:
        _require_int("Length", "length", self.length, non_negative=True)

    @property
    def constraint_name(self) -> str:
        return f"length[{self.length}]"


@dataclass(frozen=True, slots=True)
class MaxLength(Rule):
    """String must be at most ``length`` characters."""
    length: int

    def __post_init__(self) -> None:
        _require_int("MaxLength", "length", self.length, non_negative=True)

    @property
    def constraint_name(self) -> str:
        return f"max_length[{self.length}]"


@dataclass(frozen=True, slots=True)
class MinLength(Rule):
    """String must be at least ``length`` characters."""
    length: int

    def __post_init__(self) -> None:
        _require_int("MinLength", "length", self.length, non_negative=True)

    @property
    def constraint_name(self) -> str:
        return f"min_length[{self.length}]"


@dataclass(frozen=True, slots=True)
class LengthRange(Rule):
    """String length must lie strictly between ``min`` and ``max``.

    Bounds are not ordered at construction; ``min >= max`` is legal and
    simply never passes.
    """
    min: int
    max: int

    def __post_init__(self) -> None:
        _require_int("LengthRange", "min", self.min)
        _require_int("LengthRange", "max", self.max)

    @property
    def constraint_name(self) -> str:
        return f"length_range({self.min},{self.max})"


# ============================================================================
# Numeric size rules
# ============================================================================

@dataclass(frozen=True, slots=True)
class Size(Rule):
    """Integer must equal ``size``."""
    size: int

    def __post_init__(self) -> None:
        _require_int("Size", "size", self.size)

    @property
    def constraint_name(self) -> str:
        return f"size[{self.size}]"


@dataclass(frozen=True, slots=True)
class MaxSize(Rule):
    """Integer must be at most ``size``."""
    size: int

    def __post_init__(self) -> None:
        _require_int("MaxSize", "size", self.size)

    @property
    def constraint_name(self) -> str:
        return f"max_size[{self.size}]"


@dataclass(frozen=True, slots=True)
class MinSize(Rule):
    """Integer must be at least ``size``."""
    size: int

    def __post_init__(self) -> None:
        _require_int("MinSize", "size", self.size)

    @property
    def constraint_name(self) -> str:
        return f"min_size[{self.size}]"


@dataclass(frozen=True, slots=True)
class SizeRange(Rule):
    """Integer must lie strictly between ``min`` and ``max``."""
    min: int
    max: int

    def __post_init__(self) -> None:
        _require_int("SizeRange", "min", self.min)
        _require_int("SizeRange", "max", self.max)

    @property
    def constraint_name(self) -> str:
        return f"size_range({self.min},{self.max})"


SizeExact = Size
SizeMax = MaxSize
SizeMin = MinSize


# ============================================================================
# Presence, boolean and format rules
# ============================================================================

@dataclass(frozen=True, slots=True)
class Required(Rule):
    """Value must not be null."""

    @property
    def constraint_name(self) -> str:
        return "required"


@dataclass(frozen=True, slots=True)
class Bool(Rule):
    """Value must be literally ``True``."""

    @property
    def constraint_name(self) -> str:
        return "bool"


@dataclass(frozen=True, slots=True)
class Password(Rule):
    """Mixed-class password of at least ``min_length`` characters, no whitespace."""
    min_length: int

    def __post_init__(self) -> None:
        _require_int("Password", "min_length", self.min_length, non_negative=True)

    @property
    def constraint_name(self) -> str:
        return f"password[{self.min_length}]"


@dataclass(frozen=True, slots=True)
class Email(Rule):
    """Value must look like ``localpart@domain.tld``."""

    @property
    def constraint_name(self) -> str:
        return "email"


@dataclass(frozen=True, slots=True)
class Contains(Rule):
    """String must contain ``substring`` (case-sensitive)."""
    substring: str

    def __post_init__(self) -> None:
        if not isinstance(self.substring, str):
            raise RuleDefinitionError(
                f"Contains: substring must be a string, got {type(self.substring).__name__}",
                rule="Contains",
                parameter="substring",
                value=self.substring,
            )

    @property
    def constraint_name(self) -> str:
        return f"contains[{self.substring}]"


# ============================================================================
# Bindings and declarations
# ============================================================================

@dataclass(frozen=True, slots=True)
class RuleBinding:
    """A rule paired with an optional custom error message."""
    rule: Rule
    error: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.rule, Rule):
            raise RuleDefinitionError(f"Expected a Rule, got {type(self.rule).__name__}", value=self.rule)
        if self.error is not None and not isinstance(self.error, str):
            raise RuleDefinitionError(
                f"Custom error must be a string, got {type(self.error).__name__}",
                rule=self.rule.constraint_name,
                parameter="error",
                value=self.error,
            )


@dataclass(slots=True)
class FieldDeclaration:
    """A field name and the ordered bindings to evaluate against its value."""
    field: str
    bindings: list[RuleBinding] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.field, str):
            raise RuleDefinitionError(
                f"Field name must be a string, got {type(self.field).__name__}",
                parameter="field",
                value=self.field,
            )

    @classmethod
    def new(cls, field: str, rule: Rule, error: str | None = None) -> FieldDeclaration:
        """Create a declaration with exactly one binding."""
        return cls(field, [RuleBinding(rule, error)])

    def insert(self, rule: Rule, error: str | None = None) -> FieldDeclaration:
        """Append a binding after the existing ones. Returns ``self`` for chaining."""
        self.bindings.append(RuleBinding(rule, error))
        return self

    def __iter__(self) -> Iterator[RuleBinding]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)


def declare(field: str, rule: Rule, error: str | None = None) -> FieldDeclaration:
    """Shorthand for ``FieldDeclaration.new``."""
    return FieldDeclaration.new(field, rule, error)
