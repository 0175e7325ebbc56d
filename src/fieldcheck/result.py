"""Validation result types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .fields import Field


@dataclass(frozen=True)
class ValidationFailure:
    """One rule failing for one field."""

    field_name: str
    rule_tag: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "field_name": self.field_name,
            "rule_tag": self.rule_tag,
            "message": self.message,
        }


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of running every rule attached to a field.

    A successful outcome carries the validated field and no failures; a
    failed outcome carries no field and at least one failure, in the order
    the failing rules were attached. Use ``success``/``failure`` to build one.
    """

    field: Field | None
    failures: tuple[ValidationFailure, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.failures

    def __bool__(self) -> bool:
        """Allow 'if outcome:' usage to check validity."""
        return self.valid

    @property
    def name(self) -> str:
        """Name of the validated field.

        Taken from the field on success, or from the first failure otherwise.
        """
        if self.field is not None:
            return self.field.name
        if self.failures:
            return self.failures[0].field_name
        return ""

    @classmethod
    def success(cls, field: Field) -> ValidationOutcome:
        """Create a successful outcome for ``field``."""
        return cls(field=field, failures=())

    @classmethod
    def failure(cls, failures: Iterable[ValidationFailure]) -> ValidationOutcome:
        """Create a failed outcome.

        Args:
            failures: Failures in rule attachment order

        Returns:
            Failed ValidationOutcome

        Raises:
            ValueError: If ``failures`` is empty
        """
        failures = tuple(failures)
        if not failures:
            raise ValueError("A failed validation outcome needs at least one failure")
        return cls(field=None, failures=failures)
