"""Field model: named scalar values carrying an ordered rule chain.

Fields are immutable. Every builder method returns a new ``Field`` with one
more rule appended, leaving the original untouched, so partially built fields
can be shared and extended independently.

Example:
    ```python
    from fieldcheck import int_field, string_field, validate

    age = int_field("age", 16).required().to_float().min_size(18.0).max_size(21.0)
    name = string_field("first_name", "").required().min_length(3)

    outcome = validate(age)
    # ValidationOutcome(field=None, failures=(ValidationFailure(field_name='age',
    #     rule_tag='min_size', message='must be at least 18.0'),))
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from re import Pattern as RegexPattern
from typing import Any, Callable

from .coercion import coerce
from .exceptions import UnsupportedRuleError
from .patterns import Matcher, as_matcher, compile_pattern
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


class FieldKind(Enum):
    """Enumeration of supported field kinds.

    Attributes:
        INT: Whole numbers
        FLOAT: Real numbers
        STRING: Text
        BOOL: True/False values
        OPTIONAL_*: The same kinds where the value may be absent (None)
    """

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    OPTIONAL_INT = "optional_int"
    OPTIONAL_FLOAT = "optional_float"
    OPTIONAL_STRING = "optional_string"
    OPTIONAL_BOOL = "optional_bool"

    @property
    def is_optional(self) -> bool:
        return self in _OPTIONAL_TO_INNER

    @property
    def inner(self) -> FieldKind:
        """The non-optional kind wrapped by this kind (itself if not optional)."""
        return _OPTIONAL_TO_INNER.get(self, self)

    @property
    def scalar_type(self) -> type:
        """The Python type of a present value of this kind."""
        return _SCALAR_TYPES[self.inner]


_OPTIONAL_TO_INNER = {
    FieldKind.OPTIONAL_INT: FieldKind.INT,
    FieldKind.OPTIONAL_FLOAT: FieldKind.FLOAT,
    FieldKind.OPTIONAL_STRING: FieldKind.STRING,
    FieldKind.OPTIONAL_BOOL: FieldKind.BOOL,
}

_SCALAR_TYPES: dict[FieldKind, type] = {
    FieldKind.INT: int,
    FieldKind.FLOAT: float,
    FieldKind.STRING: str,
    FieldKind.BOOL: bool,
}

_NUMERIC_FLOAT = (FieldKind.FLOAT, FieldKind.OPTIONAL_FLOAT)
_TEXT = (FieldKind.STRING, FieldKind.OPTIONAL_STRING)
_INTEGER = (FieldKind.INT, FieldKind.OPTIONAL_INT)


@dataclass(frozen=True)
class Field:
    """A named value of a fixed kind plus its ordered rule chain.

    Use the constructor functions (``int_field``, ``optional_string_field``,
    ...) rather than instantiating this class directly: they normalise the
    value to the kind's scalar type.

    Attributes:
        name: The field name, used in failures and serialized output
        kind: The field kind, fixed for the field's lifetime
        value: The field value (None for an absent optional)
        rules: Attached rules in attachment order
    """

    name: str
    kind: FieldKind
    value: Any
    rules: tuple[Rule, ...] = field(default_factory=tuple)

    def append_rule(self, rule: Rule) -> Field:
        """Return a copy of this field with ``rule`` appended.

        Any rule may be attached to any kind here; the named builder methods
        are the restricted, kind-aware way to add rules.
        """
        return replace(self, rules=self.rules + (rule,))

    def _require_kind(self, operation: str, allowed: tuple[FieldKind, ...]) -> None:
        if self.kind not in allowed:
            raise UnsupportedRuleError(self.name, self.kind.name, operation)

    def _comparand(self, value: Any) -> Any:
        if value is None and self.kind.is_optional:
            return None
        return coerce(value, self.kind.scalar_type)

    def required(self) -> Field:
        return self.append_rule(Required())

    def min_size(self, threshold: float) -> Field:
        """Require a magnitude of at least ``threshold`` (float kinds only)."""
        self._require_kind("min_size", _NUMERIC_FLOAT)
        return self.append_rule(MinSize(float(threshold)))

    def max_size(self, threshold: float) -> Field:
        """Require a magnitude of at most ``threshold`` (float kinds only)."""
        self._require_kind("max_size", _NUMERIC_FLOAT)
        return self.append_rule(MaxSize(float(threshold)))

    def min_length(self, length: int) -> Field:
        """Require a trimmed length of at least ``length`` (text kinds only)."""
        self._require_kind("min_length", _TEXT)
        return self.append_rule(MinLength(int(length)))

    def max_length(self, length: int) -> Field:
        """Require a trimmed length of at most ``length`` (text kinds only)."""
        self._require_kind("max_length", _TEXT)
        return self.append_rule(MaxLength(int(length)))

    def eq(self, label: str, value: Any) -> Field:
        return self.append_rule(Eq(label, self._comparand(value)))

    def not_eq(self, label: str, value: Any) -> Field:
        return self.append_rule(NotEq(label, self._comparand(value)))

    def pattern(self, label: str, matcher: Matcher | RegexPattern[str], error: str) -> Field:
        """Require the text to satisfy a pre-built matcher (text kinds only)."""
        self._require_kind("pattern", _TEXT)
        return self.append_rule(Pattern(label, as_matcher(matcher), error))

    def raw_pattern(self, label: str, pattern: str, error: str) -> Field:
        """Compile ``pattern`` and require the text to match it (text kinds only).

        Raises:
            PatternCompileError: If the pattern is invalid
        """
        self._require_kind("raw_pattern", _TEXT)
        return self.append_rule(Pattern(label, compile_pattern(pattern), error))

    def with_predicate(self, label: str, fn: Callable[[Any], bool], error: str) -> Field:
        """Attach a custom check; ``fn`` receives the raw value (None if absent)."""
        return self.append_rule(Predicate(label, fn, error))

    def to_float(self) -> Field:
        """Convert an integer field into a float field, translating its rules.

        Must be called before ``min_size``/``max_size``, which are only exposed
        on float kinds. Predicates attached so far keep seeing integers: their
        input is rounded back before the original predicate runs.
        """
        self._require_kind("to_float", _INTEGER)
        kind = FieldKind.OPTIONAL_FLOAT if self.kind.is_optional else FieldKind.FLOAT
        value = None if self.value is None else coerce(self.value, float)
        return Field(
            name=self.name,
            kind=kind,
            value=value,
            rules=tuple(_rule_to_float(rule) for rule in self.rules),
        )


def _rule_to_float(rule: Rule) -> Rule:
    match rule:
        case Eq(label=label, comparand=comparand):
            return Eq(label, _widen(comparand))
        case NotEq(label=label, comparand=comparand):
            return NotEq(label, _widen(comparand))
        case Predicate(label=label, fn=fn, error=error):
            return Predicate(label, _rounding(fn), error)
        case _:
            return rule


def _widen(value: Any) -> Any:
    return None if value is None else coerce(value, float)


def _rounding(fn: Callable[[Any], bool]) -> Callable[[Any], bool]:
    def wrapped(value: Any) -> bool:
        return fn(None if value is None else round(value))

    return wrapped


def _make(name: str, kind: FieldKind, value: Any) -> Field:
    if value is None and kind.is_optional:
        return Field(name, kind, None)
    return Field(name, kind, coerce(value, kind.scalar_type))


def int_field(name: str, value: int) -> Field:
    return _make(name, FieldKind.INT, value)


def float_field(name: str, value: float) -> Field:
    return _make(name, FieldKind.FLOAT, value)


def string_field(name: str, value: str) -> Field:
    return _make(name, FieldKind.STRING, value)


def bool_field(name: str, value: bool) -> Field:
    return _make(name, FieldKind.BOOL, value)


def optional_int_field(name: str, value: int | None) -> Field:
    return _make(name, FieldKind.OPTIONAL_INT, value)


def optional_float_field(name: str, value: float | None) -> Field:
    return _make(name, FieldKind.OPTIONAL_FLOAT, value)


def optional_string_field(name: str, value: str | None) -> Field:
    return _make(name, FieldKind.OPTIONAL_STRING, value)


def optional_bool_field(name: str, value: bool | None) -> Field:
    return _make(name, FieldKind.OPTIONAL_BOOL, value)


FIELD_CONSTRUCTORS: dict[FieldKind, Callable[[str, Any], Field]] = {
    FieldKind.INT: int_field,
    FieldKind.FLOAT: float_field,
    FieldKind.STRING: string_field,
    FieldKind.BOOL: bool_field,
    FieldKind.OPTIONAL_INT: optional_int_field,
    FieldKind.OPTIONAL_FLOAT: optional_float_field,
    FieldKind.OPTIONAL_STRING: optional_string_field,
    FieldKind.OPTIONAL_BOOL: optional_bool_field,
}


# Function forms of the builder methods


def append_rule(field: Field, rule: Rule) -> Field:
    return field.append_rule(rule)


def required(field: Field) -> Field:
    return field.required()


def min_size(field: Field, threshold: float) -> Field:
    return field.min_size(threshold)


def max_size(field: Field, threshold: float) -> Field:
    return field.max_size(threshold)


def min_length(field: Field, length: int) -> Field:
    return field.min_length(length)


def max_length(field: Field, length: int) -> Field:
    return field.max_length(length)


def eq(field: Field, label: str, value: Any) -> Field:
    return field.eq(label, value)


def not_eq(field: Field, label: str, value: Any) -> Field:
    return field.not_eq(label, value)


def pattern(field: Field, label: str, matcher: Matcher | RegexPattern[str], error: str) -> Field:
    return field.pattern(label, matcher, error)


def raw_pattern(field: Field, label: str, pattern: str, error: str) -> Field:
    return field.raw_pattern(label, pattern, error)


def with_predicate(field: Field, label: str, fn: Callable[[Any], bool], error: str) -> Field:
    return field.with_predicate(label, fn, error)


def to_float(field: Field) -> Field:
    return field.to_float()
