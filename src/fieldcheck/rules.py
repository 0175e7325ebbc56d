"""Rule variants attachable to fields.

Rules form a closed set of immutable variants. Each one knows its tag (the
machine-readable key used when reporting a failure) and its message; how a
rule is evaluated against a field lives in :mod:`fieldcheck.engine`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .coercion import stringify
from .patterns import Matcher


class Rule:
    """Base class for all rule variants."""

    default_tag: str = ""

    @property
    def tag(self) -> str:
        return self.default_tag

    @property
    def message(self) -> str:
        raise NotImplementedError


class _LabelledRule(Rule):
    """Rule whose tag is a caller-supplied label, if one is given."""

    label: str

    @property
    def tag(self) -> str:
        return self.label or self.default_tag


@dataclass(frozen=True)
class Required(Rule):
    """The field's value must not be empty."""

    default_tag = "required"

    @property
    def message(self) -> str:
        return "is required"


@dataclass(frozen=True)
class MinSize(Rule):
    """The field's magnitude must be at least ``threshold``."""

    threshold: float
    default_tag = "min_size"

    def __post_init__(self) -> None:
        object.__setattr__(self, "threshold", float(self.threshold))

    @property
    def message(self) -> str:
        return f"must be at least {stringify(self.threshold)}"


@dataclass(frozen=True)
class MaxSize(Rule):
    """The field's magnitude must be at most ``threshold``."""

    threshold: float
    default_tag = "max_size"

    def __post_init__(self) -> None:
        object.__setattr__(self, "threshold", float(self.threshold))

    @property
    def message(self) -> str:
        return f"must not be greater than {stringify(self.threshold)}"


@dataclass(frozen=True)
class MinLength(Rule):
    """The trimmed text form must be at least ``threshold`` characters."""

    threshold: int
    default_tag = "min_length"

    @property
    def message(self) -> str:
        return f"must be at least {self.threshold} characters"


@dataclass(frozen=True)
class MaxLength(Rule):
    """The trimmed text form must be at most ``threshold`` characters."""

    threshold: int
    default_tag = "max_length"

    @property
    def message(self) -> str:
        return f"must not be longer than {self.threshold} characters"


@dataclass(frozen=True)
class Eq(_LabelledRule):
    """The field's value must equal ``comparand``."""

    label: str
    comparand: Any
    default_tag = "eq"

    @property
    def message(self) -> str:
        return f"must be equal to {_render(self.comparand)}"


@dataclass(frozen=True)
class NotEq(_LabelledRule):
    """The field's value must differ from ``comparand``."""

    label: str
    comparand: Any
    default_tag = "not_eq"

    @property
    def message(self) -> str:
        return f"must not be equal to {_render(self.comparand)}"


@dataclass(frozen=True)
class Pattern(_LabelledRule):
    """The field's text must satisfy ``matcher``."""

    label: str
    matcher: Matcher
    error: str
    default_tag = "pattern"

    @property
    def message(self) -> str:
        return self.error


@dataclass(frozen=True)
class Predicate(_LabelledRule):
    """A caller-supplied check on the field's raw value."""

    label: str
    fn: Callable[[Any], bool]
    error: str
    default_tag = "custom"

    @property
    def message(self) -> str:
        return self.error


def _render(value: Any) -> str:
    # Absent optional comparands have no scalar text form
    return "none" if value is None else stringify(value)


__all__ = [
    "Rule",
    "Required",
    "MinSize",
    "MaxSize",
    "MinLength",
    "MaxLength",
    "Eq",
    "NotEq",
    "Pattern",
    "Predicate",
]
