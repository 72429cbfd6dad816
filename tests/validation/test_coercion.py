"""Tests for explicit shape coercion."""

from __future__ import annotations

from typing import Any

import pytest

from fieldrules.errors import ErrorCode, Err, Ok
from fieldrules.validation import DEFAULT_COERCER, ExplicitCoercion, ToBoolean, ToInteger, ToText


class TestToText:
    def test_string_passes_through(self) -> None:
        assert ToText().coerce("abc") == Ok("abc")

    @pytest.mark.parametrize("value", [1, 1.5, True, None, [], {}])
    def test_non_string_rejected(self, value: Any) -> None:
        result = ToText().coerce(value)
        assert result.is_err()
        assert result.unwrap_err().code is ErrorCode.E2004_INVALID_TYPE


class TestToInteger:
    def test_int(self) -> None:
        assert ToInteger().coerce(42) == Ok(42)

    def test_integral_float(self) -> None:
        result = ToInteger().coerce(42.0)
        assert result == Ok(42)
        assert type(result.unwrap()) is int

    def test_fractional_float_is_format_error(self) -> None:
        result = ToInteger().coerce(4.2)
        assert result.is_err()
        assert result.unwrap_err().code is ErrorCode.E2002_INVALID_FORMAT

    @pytest.mark.parametrize("value", [True, False, "42", None])
    def test_rejected(self, value: Any) -> None:
        assert not ToInteger().can_coerce(value)
        assert ToInteger().coerce(value).is_err()


class TestToBoolean:
    @pytest.mark.parametrize("value", [True, False])
    def test_bool(self, value: bool) -> None:
        assert ToBoolean().coerce(value) == Ok(value)

    @pytest.mark.parametrize("value", [1, 0, "true", None])
    def test_rejected(self, value: Any) -> None:
        assert isinstance(ToBoolean().coerce(value), Err)


class TestExplicitCoercion:
    def test_dispatch_by_target_type(self) -> None:
        assert DEFAULT_COERCER.coerce("x", str) == Ok("x")
        assert DEFAULT_COERCER.coerce(3, int) == Ok(3)
        assert DEFAULT_COERCER.coerce(False, bool) == Ok(False)

    def test_failure_reports_target(self) -> None:
        error = DEFAULT_COERCER.coerce(True, int).unwrap_err()
        assert error.metadata["target_type"] == "int"
        assert error.metadata["source_type"] == "bool"

    def test_unknown_target_type(self) -> None:
        result = DEFAULT_COERCER.coerce(1.5, float)
        assert result.is_err()
        assert "float" in result.unwrap_err().message

    def test_custom_rule_set(self) -> None:
        text_only = ExplicitCoercion(rules=(ToText(),))
        assert text_only.coerce("a", str) == Ok("a")
        assert text_only.coerce(7, int).is_err()
