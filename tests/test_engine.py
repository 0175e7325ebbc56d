"""
Tests for per-rule evaluation semantics.
"""

import pytest

from fieldcheck import (
    Eq,
    MaxLength,
    MaxSize,
    MinLength,
    MinSize,
    NotEq,
    Pattern,
    Predicate,
    RegexMatcher,
    Required,
    Rule,
    UnsupportedRuleError,
    bool_field,
    evaluate,
    float_field,
    int_field,
    optional_bool_field,
    optional_float_field,
    optional_int_field,
    optional_string_field,
    string_field,
)
from fieldcheck.engine import length_of, size_of


class TestRequired:
    """Test what counts as empty."""

    @pytest.mark.parametrize(
        "field,expected",
        [
            (int_field("n", 0), False),
            (int_field("n", 18), True),
            (float_field("f", 0.0), False),
            (float_field("f", 0.1), True),
            (string_field("s", ""), False),
            (string_field("s", " "), False),
            (string_field("s", "\t\n"), False),
            (string_field("s", "x"), True),
            (bool_field("b", True), True),
            (bool_field("b", False), True),
            (optional_string_field("s", None), False),
            (optional_int_field("n", None), False),
            (optional_bool_field("b", None), False),
            (optional_string_field("s", ""), False),
            (optional_string_field("s", "   "), False),
            (optional_string_field("s", "x"), True),
            (optional_int_field("n", 0), False),
            (optional_bool_field("b", False), True),
        ],
    )
    def test_truth_table(self, field, expected):
        """Test the required truth table across kinds."""
        assert evaluate(Required(), field) is expected


class TestSize:
    """Test magnitude bounds."""

    def test_numbers_use_their_value(self):
        """Test integer and float magnitudes."""
        assert evaluate(MinSize(18.0), int_field("age", 18))
        assert not evaluate(MinSize(18.0), int_field("age", 17))
        assert evaluate(MaxSize(21.0), float_field("age", 21.0))
        assert not evaluate(MaxSize(21.0), float_field("age", 21.5))

    def test_text_counts_untrimmed_bytes(self):
        """Test that text size is its byte length including whitespace."""
        field = string_field("s", "hello   ")
        assert size_of(field.kind, field.value) == 8.0
        assert not evaluate(MaxSize(5.0), field)
        assert evaluate(MaxLength(5), field)

    def test_text_counts_bytes_not_characters(self):
        """Test multi-byte characters."""
        field = string_field("s", "héllo")
        assert size_of(field.kind, field.value) == 6.0
        assert length_of(field.kind, field.value) == 5

    def test_booleans_are_one_or_zero(self):
        """Test boolean magnitudes."""
        assert evaluate(MinSize(1.0), bool_field("b", True))
        assert not evaluate(MinSize(1.0), bool_field("b", False))
        assert evaluate(MaxSize(0.0), bool_field("b", False))

    def test_absent_optional_uses_zero_value(self):
        """Test absent optionals against size bounds."""
        for field in (
            optional_int_field("n", None),
            optional_float_field("f", None),
            optional_string_field("s", None),
            optional_bool_field("b", None),
        ):
            assert not evaluate(MinSize(0.5), field)
            assert evaluate(MaxSize(0.0), field)

    def test_present_optional_uses_inner_value(self):
        """Test present optionals against size bounds."""
        assert evaluate(MinSize(3.0), optional_float_field("f", 3.0))
        assert not evaluate(MaxSize(2.0), optional_string_field("s", "abc"))


class TestLength:
    """Test textual length bounds."""

    def test_trims_before_counting(self):
        """Test that surrounding whitespace is not counted."""
        field = string_field("s", "hell  ")
        assert not evaluate(MinLength(5), field)
        assert evaluate(MaxLength(5), field)

    def test_bounds_are_inclusive(self):
        """Test equality at the bounds."""
        field = string_field("s", "abc")
        assert evaluate(MinLength(3), field)
        assert evaluate(MaxLength(3), field)

    def test_non_text_kinds_use_text_form(self):
        """Test length of numbers and booleans."""
        assert length_of(int_field("n", 1234).kind, 1234) == 4
        assert evaluate(MinLength(3), float_field("f", 0.1))
        assert evaluate(MaxLength(4), bool_field("b", True))
        assert not evaluate(MaxLength(4), bool_field("b", False))

    def test_absent_optional_has_zero_length(self):
        """Test absent optionals against length bounds."""
        field = optional_string_field("s", None)
        assert not evaluate(MinLength(1), field)
        assert evaluate(MaxLength(0), field)


class TestEquality:
    """Test Eq and NotEq."""

    def test_numeric_equality(self):
        """Test numbers compare by value."""
        assert evaluate(Eq("", 3), int_field("n", 3))
        assert evaluate(Eq("", 3.0), int_field("n", 3))
        assert evaluate(NotEq("", 4), int_field("n", 3))

    def test_exact_text_equality(self):
        """Test text compares without normalisation."""
        assert evaluate(Eq("", "abc"), string_field("s", "abc"))
        assert not evaluate(Eq("", "abc"), string_field("s", "abc "))
        assert not evaluate(Eq("", "ABC"), string_field("s", "abc"))

    def test_not_eq_is_negation(self):
        """Test that NotEq fails exactly when Eq passes."""
        for value in ("a", "b"):
            field = string_field("s", value)
            assert evaluate(Eq("", "a"), field) is not evaluate(NotEq("", "a"), field)

    def test_absent_optional(self):
        """Test equality with absent optionals."""
        assert evaluate(Eq("", None), optional_int_field("n", None))
        assert not evaluate(Eq("", 0), optional_int_field("n", None))


class TestPattern:
    """Test pattern matching."""

    def test_search_honours_anchors(self):
        """Test unanchored and anchored patterns."""
        field = string_field("s", "abc123")
        assert evaluate(Pattern("", RegexMatcher(r"\d+"), "digits"), field)
        assert not evaluate(Pattern("", RegexMatcher(r"^\d+$"), "digits"), field)

    def test_non_text_kinds_use_text_form(self):
        """Test patterns on numbers and booleans."""
        assert evaluate(Pattern("", RegexMatcher(r"^\d+$"), "digits"), int_field("n", 42))
        assert evaluate(Pattern("", RegexMatcher("^true$"), "true"), bool_field("b", True))

    def test_absent_optional_matches_empty_text(self):
        """Test patterns against absent optionals."""
        field = optional_string_field("s", None)
        assert evaluate(Pattern("", RegexMatcher("^$"), "empty"), field)
        assert not evaluate(Pattern("", RegexMatcher("."), "any"), field)

    def test_custom_matcher(self):
        """Test a matcher that is not regex based."""

        class Palindrome:
            def test(self, text):
                return text == text[::-1]

        assert evaluate(Pattern("", Palindrome(), "palindrome"), string_field("s", "level"))
        assert not evaluate(Pattern("", Palindrome(), "palindrome"), string_field("s", "levels"))


class TestPredicate:
    """Test custom predicates."""

    def test_receives_raw_value(self):
        """Test that predicates get the field's raw value."""
        seen = []
        rule = Predicate("", lambda v: seen.append(v) or True, "never")
        assert evaluate(rule, string_field("s", "  raw  "))
        assert evaluate(rule, optional_int_field("n", None))
        assert seen == ["  raw  ", None]

    def test_errors_propagate(self):
        """Test that a failing predicate is not turned into a validation failure."""
        rule = Predicate("", lambda v: 1 / 0, "boom")
        with pytest.raises(ZeroDivisionError):
            evaluate(rule, int_field("n", 1))


def test_unknown_rule_variant():
    """Test that an unknown rule variant raises."""

    class Unknown(Rule):
        pass

    with pytest.raises(UnsupportedRuleError):
        evaluate(Unknown(), int_field("n", 1))
