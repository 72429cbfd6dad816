"""Tests for rule construction, bindings and declarations."""

from __future__ import annotations

import pytest

from fieldrules.errors import ErrorCode, RuleDefinitionError
from fieldrules.validation import (
    Bool,
    Contains,
    Email,
    FieldDeclaration,
    Length,
    LengthRange,
    MaxLength,
    MaxSize,
    MinLength,
    MinSize,
    Password,
    Required,
    RuleBinding,
    Size,
    SizeExact,
    SizeMax,
    SizeMin,
    SizeRange,
    declare,
)


class TestRuleConstruction:
    @pytest.mark.parametrize("rule_cls", [Length, MaxLength, MinLength, Password])
    def test_negative_length_rejected(self, rule_cls: type) -> None:
        with pytest.raises(RuleDefinitionError) as exc_info:
            rule_cls(-1)
        assert exc_info.value.code is ErrorCode.E2006_INVALID_RULE
        assert exc_info.value.value == -1

    @pytest.mark.parametrize("rule_cls", [Length, MaxLength, MinLength, Size, MaxSize, MinSize, Password])
    def test_non_integer_parameter_rejected(self, rule_cls: type) -> None:
        with pytest.raises(RuleDefinitionError):
            rule_cls("12")

    @pytest.mark.parametrize("rule_cls", [Length, Size])
    def test_bool_is_not_an_integer_parameter(self, rule_cls: type) -> None:
        with pytest.raises(RuleDefinitionError):
            rule_cls(True)

    def test_rule_definition_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Length(-5)

    @pytest.mark.parametrize("rule_cls", [Size, MaxSize, MinSize])
    def test_negative_size_allowed(self, rule_cls: type) -> None:
        assert rule_cls(-10).size == -10

    def test_zero_length_allowed(self) -> None:
        assert Length(0).length == 0

    @pytest.mark.parametrize("rule_cls", [LengthRange, SizeRange])
    def test_inverted_range_is_not_a_construction_error(self, rule_cls: type) -> None:
        rule = rule_cls(10, 2)
        assert (rule.min, rule.max) == (10, 2)

    @pytest.mark.parametrize("rule_cls", [LengthRange, SizeRange])
    def test_range_bounds_must_be_integers(self, rule_cls: type) -> None:
        with pytest.raises(RuleDefinitionError):
            rule_cls(1, 2.5)

    def test_contains_requires_string(self) -> None:
        with pytest.raises(RuleDefinitionError):
            Contains(3)

    def test_size_aliases(self) -> None:
        assert SizeExact is Size
        assert SizeMax is MaxSize
        assert SizeMin is MinSize

    def test_rules_are_frozen_and_comparable(self) -> None:
        rule = Length(3)
        assert rule == Length(3)
        assert hash(rule) == hash(Length(3))
        with pytest.raises(AttributeError):
            rule.length = 4  # type: ignore[misc]


class TestConstraintNames:
    @pytest.mark.parametrize(
        "rule,expected",
        [
            (Length(12), "length[12]"),
            (MaxLength(5), "max_length[5]"),
            (MinLength(2), "min_length[2]"),
            (Size(1), "size[1]"),
            (MaxSize(9), "max_size[9]"),
            (MinSize(18), "min_size[18]"),
            (Bool(), "bool"),
            (Required(), "required"),
            (Email(), "email"),
            (Password(8), "password[8]"),
            (LengthRange(1, 5), "length_range(1,5)"),
            (SizeRange(0, 100), "size_range(0,100)"),
            (Contains("@"), "contains[@]"),
        ],
    )
    def test_constraint_name(self, rule, expected: str) -> None:
        assert rule.constraint_name == expected
        assert str(rule) == expected


class TestRuleBinding:
    def test_defaults_to_no_custom_error(self) -> None:
        binding = RuleBinding(Required())
        assert binding.error is None

    def test_custom_error_must_be_string(self) -> None:
        with pytest.raises(RuleDefinitionError):
            RuleBinding(Required(), 42)  # type: ignore[arg-type]

    def test_rule_must_be_a_rule(self) -> None:
        with pytest.raises(RuleDefinitionError):
            RuleBinding("required")  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        binding = RuleBinding(Required(), "needed")
        with pytest.raises(AttributeError):
            binding.error = "other"  # type: ignore[misc]


class TestFieldDeclaration:
    def test_new_has_exactly_one_binding(self) -> None:
        decl = FieldDeclaration.new("name", Length(12))
        assert decl.field == "name"
        assert decl.bindings == [RuleBinding(Length(12), None)]

    def test_declare_is_shorthand_for_new(self) -> None:
        assert declare("age", MinSize(18), "too young") == FieldDeclaration.new("age", MinSize(18), "too young")

    def test_insert_appends_in_order(self) -> None:
        decl = declare("bio", Required())
        decl.insert(MinLength(12), "Bio is too short!")
        decl.insert(MaxLength(200))
        assert [b.rule for b in decl] == [Required(), MinLength(12), MaxLength(200)]
        assert [b.error for b in decl] == [None, "Bio is too short!", None]
        assert len(decl) == 3

    def test_insert_returns_declaration_for_chaining(self) -> None:
        decl = declare("email", Required()).insert(Email()).insert(Contains("@"))
        assert len(decl) == 3

    def test_field_name_must_be_string(self) -> None:
        with pytest.raises(RuleDefinitionError):
            declare(5, Required())  # type: ignore[arg-type]
