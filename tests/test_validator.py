"""
Tests for the validation driver and batch validation.
"""

import logging

import pytest

from fieldcheck import (
    ValidationFailure,
    ValidationOutcome,
    bool_field,
    float_field,
    int_field,
    optional_string_field,
    string_field,
    validate,
    validate_many,
)


class TestValidationOutcome:
    """Test outcome construction."""

    def test_success(self):
        """Test a successful outcome."""
        field = int_field("n", 1)
        outcome = ValidationOutcome.success(field)
        assert outcome.valid is True
        assert bool(outcome) is True
        assert outcome.field is field
        assert outcome.failures == ()
        assert outcome.name == "n"

    def test_failure(self):
        """Test a failed outcome."""
        failure = ValidationFailure("n", "required", "is required")
        outcome = ValidationOutcome.failure([failure])
        assert outcome.valid is False
        assert bool(outcome) is False
        assert outcome.field is None
        assert outcome.failures == (failure,)
        assert outcome.name == "n"

    def test_failure_needs_failures(self):
        """Test that a failed outcome cannot be empty."""
        with pytest.raises(ValueError):
            ValidationOutcome.failure([])

    def test_failure_to_dict(self):
        """Test failure dictionary form."""
        failure = ValidationFailure("n", "required", "is required")
        assert failure.to_dict() == {
            "field_name": "n",
            "rule_tag": "required",
            "message": "is required",
        }


class TestValidate:
    """Test accumulation of failures."""

    @pytest.mark.parametrize(
        "field",
        [
            int_field("n", 0),
            float_field("f", 0.0),
            string_field("s", ""),
            bool_field("b", False),
            optional_string_field("o", None),
        ],
    )
    def test_empty_rule_chain_always_succeeds(self, field):
        """Test that a field without rules is valid."""
        outcome = validate(field)
        assert outcome.valid
        assert outcome.field == field

    def test_documented_age_scenario(self, underage):
        """Test the under-age example: only the minimum fails."""
        outcome = validate(underage)
        assert not outcome.valid
        assert outcome.failures == (ValidationFailure("age", "min_size", "must be at least 18.0"),)

    def test_valid_field_is_returned(self, valid_age):
        """Test that a passing field comes back unchanged."""
        outcome = validate(valid_age)
        assert outcome.valid
        assert outcome.field is valid_age

    def test_no_short_circuit(self):
        """Test that every rule is evaluated and failures keep attachment order."""
        field = (
            string_field("code", "ab")
            .min_length(3)
            .max_length(5)
            .raw_pattern("digits", r"^\d+$", "must be digits")
        )
        outcome = validate(field)
        assert [failure.rule_tag for failure in outcome.failures] == ["min_length", "digits"]
        assert [failure.message for failure in outcome.failures] == [
            "must be at least 3 characters",
            "must be digits",
        ]

    def test_all_failures_reported(self, first_name):
        """Test that an empty required name reports both problems."""
        outcome = validate(first_name)
        assert outcome.failures == (
            ValidationFailure("first_name", "required", "is required"),
            ValidationFailure("first_name", "min_length", "must be at least 3 characters"),
        )

    def test_idempotent(self, first_name, valid_age):
        """Test that validating twice gives the same outcome."""
        assert validate(first_name) == validate(first_name)
        assert validate(valid_age) == validate(valid_age)

    def test_predicate_and_equality_messages(self):
        """Test messages and tags of labelled rules."""
        field = (
            string_field("password", "secret")
            .eq("matches_confirmation", "Secret")
            .not_eq("not_default", "secret")
            .with_predicate("has_digit", lambda v: any(c.isdigit() for c in v), "needs a digit")
        )
        assert validate(field).failures == (
            ValidationFailure("password", "matches_confirmation", "must be equal to Secret"),
            ValidationFailure("password", "not_default", "must not be equal to secret"),
            ValidationFailure("password", "has_digit", "needs a digit"),
        )

    def test_predicate_errors_propagate(self):
        """Test that a broken predicate aborts validation."""
        field = int_field("n", 1).with_predicate("broken", lambda v: v["missing"], "never")
        with pytest.raises(TypeError):
            validate(field)

    def test_logs_summary(self, caplog, first_name):
        """Test debug logging of validation runs."""
        with caplog.at_level(logging.DEBUG, logger="fieldcheck.validator"):
            validate(first_name)
        assert "first_name" in caplog.text
        assert "2 failures" in caplog.text


class TestValidateMany:
    """Test batch validation."""

    def test_keeps_all_entries_by_default(self, valid_age, last_name):
        """Test that passing fields are included with no failures."""
        results = validate_many([valid_age, last_name])
        assert results == [
            ("age", []),
            (
                "last_name",
                [ValidationFailure("last_name", "max_length", "must not be longer than 3 characters")],
            ),
        ]

    def test_keep_failed_only(self, valid_age, last_name):
        """Test dropping passing fields."""
        results = validate_many([valid_age, last_name], keep_failed_only=True)
        assert len(results) == 1
        assert results[0][0] == "last_name"

        assert len(validate_many([valid_age, last_name], keep_failed_only=False)) == 2

    def test_preserves_input_order(self, first_name, last_name, underage):
        """Test that results follow the input order."""
        results = validate_many([last_name, underage, first_name])
        assert [name for name, _ in results] == ["last_name", "age", "first_name"]

    def test_accepts_iterables(self, valid_age):
        """Test batch validation over a generator."""
        results = validate_many(field for field in [valid_age])
        assert results == [("age", [])]

    def test_empty_batch(self):
        """Test an empty batch."""
        assert validate_many([]) == []
