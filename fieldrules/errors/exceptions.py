"""Exceptions raised for API misuse.

Data-dependent failures never raise; they are recorded in the outcome.
Only malformed declarations fail fast, at construction time.
"""
from typing import Any

from .types import ErrorCode


class RuleDefinitionError(ValueError):
    """A rule, binding or declaration was built with invalid arguments."""

    code = ErrorCode.E2006_INVALID_RULE

    def __init__(self, message: str, *, rule: str | None = None, parameter: str | None = None, value: Any = None):
        super().__init__(message)
        self.rule, self.parameter, self.value = rule, parameter, value
