"""Rule evaluation: one predicate per rule variant per field kind.

Each rule measures the field differently:

- ``Required`` asks whether the value is empty (0, 0.0, blank text, absent);
  booleans are never empty.
- ``MinSize``/``MaxSize`` compare a magnitude: the number itself, the UTF-8
  byte length of text (untrimmed), 1.0/0.0 for booleans, and the kind's zero
  value for an absent optional.
- ``MinLength``/``MaxLength`` compare the character length of the value's
  canonical text form after trimming surrounding whitespace.
- ``Eq``/``NotEq`` compare the raw value.
- ``Pattern`` tests the value's text form against the rule's matcher.
- ``Predicate`` calls the caller's function with the raw value.

Evaluation is pure. Exceptions raised by predicates or matchers propagate.
"""

from __future__ import annotations

from typing import Any

from .coercion import stringify, zero_value
from .exceptions import UnsupportedRuleError
from .fields import Field, FieldKind
from .rules import (
    Eq,
    MaxLength,
    MaxSize,
    MinLength,
    MinSize,
    NotEq,
    Pattern,
    Predicate,
    Required,
    Rule,
)


def evaluate(rule: Rule, field: Field) -> bool:
    """Check a single rule against a field.

    Args:
        rule: Rule to evaluate
        field: Field to evaluate it against

    Returns:
        True if the rule passes

    Raises:
        UnsupportedRuleError: If the rule is not one of the known variants
    """
    match rule:
        case Required():
            return is_present(field.kind, field.value)
        case MinSize(threshold=threshold):
            return size_of(field.kind, field.value) >= threshold
        case MaxSize(threshold=threshold):
            return size_of(field.kind, field.value) <= threshold
        case MinLength(threshold=threshold):
            return length_of(field.kind, field.value) >= threshold
        case MaxLength(threshold=threshold):
            return length_of(field.kind, field.value) <= threshold
        case Eq(comparand=comparand):
            return field.value == comparand
        case NotEq(comparand=comparand):
            return field.value != comparand
        case Pattern(matcher=matcher):
            return bool(matcher.test(text_of(field.kind, field.value)))
        case Predicate(fn=fn):
            return bool(fn(field.value))
        case _:
            raise UnsupportedRuleError(field.name, field.kind.name, type(rule).__name__)


def is_present(kind: FieldKind, value: Any) -> bool:
    """Whether a value counts as non-empty for ``Required``."""
    match kind:
        case FieldKind.INT:
            return value != 0
        case FieldKind.FLOAT:
            return value != 0.0
        case FieldKind.STRING:
            return value.strip() != ""
        case FieldKind.BOOL:
            return True
        case (
            FieldKind.OPTIONAL_INT
            | FieldKind.OPTIONAL_FLOAT
            | FieldKind.OPTIONAL_STRING
            | FieldKind.OPTIONAL_BOOL
        ):
            return value is not None and is_present(kind.inner, value)
    raise UnsupportedRuleError("", str(kind), "required")


def size_of(kind: FieldKind, value: Any) -> float:
    """Magnitude of a value for ``MinSize``/``MaxSize``."""
    match kind:
        case FieldKind.INT | FieldKind.FLOAT:
            return float(value)
        case FieldKind.STRING:
            return float(len(value.encode("utf-8")))
        case FieldKind.BOOL:
            return 1.0 if value else 0.0
        case (
            FieldKind.OPTIONAL_INT
            | FieldKind.OPTIONAL_FLOAT
            | FieldKind.OPTIONAL_STRING
            | FieldKind.OPTIONAL_BOOL
        ):
            if value is None:
                value = zero_value(kind.scalar_type)
            return size_of(kind.inner, value)
    raise UnsupportedRuleError("", str(kind), "size")


def text_of(kind: FieldKind, value: Any) -> str:
    """Canonical text form of a value; absent optionals render as ``""``."""
    if kind.is_optional and value is None:
        return ""
    return stringify(value)


def length_of(kind: FieldKind, value: Any) -> int:
    """Trimmed character length of a value for ``MinLength``/``MaxLength``."""
    return len(text_of(kind, value).strip())
