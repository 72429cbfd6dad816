"""Validator: the evaluation loop

For every field present in the record's value tree, every declaration with
that exact name is evaluated, binding by binding, in declaration order.
All bindings always run; failures accumulate and never stop the loop.

A record that cannot be viewed as an object has no fields to validate and
passes vacuously, unless ``ValidationConfig.reject_non_object`` is set.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from fieldrules.errors import ErrorCode, Ok
from fieldrules.logging import validation_logger
from .checkers import check
from .errors import ROOT_FIELD, ErrorAccumulator
from .outcome import ValidationOutcome
from .rules import FieldDeclaration
from .view import to_object

log = validation_logger()

NON_OBJECT_MESSAGE = "input record is not an object"


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Configuration for one validator."""
    reject_non_object: bool = False

    @classmethod
    def from_settings(cls) -> ValidationConfig:
        from fieldrules.config import get_settings
        return cls(reject_non_object=get_settings().REJECT_NON_OBJECT)


class Validator:
    """Evaluates field declarations against one record.

    The record is only read, never copied or mutated; it must stay
    unchanged for the duration of ``validate``.

    Usage:
        validator = Validator(user, [
            declare("name", Length(12)),
            declare("age", MinSize(18), "You're under-aged!"),
        ])
        outcome = validator.validate()
        if not outcome:
            return outcome.errors
    """

    __slots__ = ("data", "declarations", "config")

    def __init__(
        self,
        data: Any,
        declarations: Iterable[FieldDeclaration],
        config: ValidationConfig | None = None,
    ):
        self.data = data
        self.declarations: tuple[FieldDeclaration, ...] = tuple(declarations)
        self.config = config or ValidationConfig()

    def declarations_for(self, field: str) -> list[FieldDeclaration]:
        """Every declaration named ``field``, in declaration order."""
        return [decl for decl in self.declarations if decl.field == field]

    def validate(self) -> ValidationOutcome:
        accumulator = ErrorAccumulator()
        log.debug(
            "validation_started",
            record_type=type(self.data).__name__,
            declarations=len(self.declarations),
        )
        match to_object(self.data):
            case Ok(tree):
                for name, value in tree.items():
                    for declaration in self.declarations_for(name):
                        self._evaluate(declaration, value, accumulator)
            case failure:
                error = failure.unwrap_err()
                log.warning(
                    "non_object_input_skipped",
                    record_type=type(self.data).__name__,
                    code=error.code.name,
                    rejected=self.config.reject_non_object,
                )
                if self.config.reject_non_object:
                    accumulator.add_failure(
                        ROOT_FIELD,
                        "object",
                        NON_OBJECT_MESSAGE,
                        None,
                        ErrorCode.E2007_INVALID_INPUT_SHAPE,
                    )

        outcome = ValidationOutcome.from_accumulator(accumulator)
        log.debug(
            "validation_completed",
            declarations=len(self.declarations),
            passed=outcome.passed,
            error_count=outcome.error_count,
            failed_fields=outcome.fields,
        )
        return outcome

    def _evaluate(self, declaration: FieldDeclaration, value: Any, accumulator: ErrorAccumulator) -> None:
        for binding in declaration.bindings:
            result = check(declaration.field, binding.rule, value)
            if not result.passed:
                accumulator.add_failure(
                    declaration.field,
                    binding.rule.constraint_name,
                    result.message,
                    binding.error,
                    result.code,
                )


def validate(
    data: Any,
    declarations: Sequence[FieldDeclaration],
    config: ValidationConfig | None = None,
) -> ValidationOutcome:
    """Build a ``Validator`` and run it once."""
    return Validator(data, declarations, config).validate()
