"""Validation driver and batch validation.

``validate`` evaluates every rule of a field, in attachment order, without
stopping at the first failure, so callers can report all problems at once.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .engine import evaluate
from .fields import Field
from .result import ValidationFailure, ValidationOutcome

logger = logging.getLogger(__name__)


def validate(field: Field) -> ValidationOutcome:
    """Run every rule attached to a field.

    Args:
        field: Field to validate

    Returns:
        Successful outcome carrying the field if every rule passed, otherwise a
        failed outcome with one failure per failing rule in attachment order
    """
    failures = [
        ValidationFailure(field_name=field.name, rule_tag=rule.tag, message=rule.message)
        for rule in field.rules
        if not evaluate(rule, field)
    ]

    logger.debug(
        f"Validated field '{field.name}': {len(field.rules)} rules, {len(failures)} failures"
    )

    if failures:
        return ValidationOutcome.failure(failures)
    return ValidationOutcome.success(field)


def validate_many(
    fields: Iterable[Field],
    keep_failed_only: bool = False,
) -> list[tuple[str, list[ValidationFailure]]]:
    """Validate multiple fields independently.

    Args:
        fields: Fields to validate
        keep_failed_only: If True, drop entries for fields that passed

    Returns:
        One ``(field_name, failures)`` entry per field in input order; the
        failure list is empty for a field that passed
    """
    results = []
    for field in fields:
        outcome = validate(field)
        failures = list(outcome.failures)
        if keep_failed_only and not failures:
            continue
        results.append((field.name, failures))
    return results
