"""JSON-shaped reporting of validation outcomes.

Each validated field becomes a ``(name, value)`` pair where ``value`` is
``None`` (JSON null) when the field passed, otherwise its failures in one of
two shapes:

- ``SerializationMode.LIST``: a list of failure messages
- ``SerializationMode.MAP``: a mapping of rule tag to failure message

Example:
    ```python
    pairs = [
        to_serializable(validate(first_name)),
        to_serializable(validate(last_name), "renamed_last_name"),
    ]
    serializables_to_string(pairs)
    # '{"first_name":{"required":"is required","min_length":"must be at least 3 characters"},
    #   "renamed_last_name":{"max_length":"must not be longer than 3 characters"}}'
    has_errors(pairs)
    # True
    ```
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Iterable, Sequence

from .exceptions import SerializationError
from .fields import Field
from .result import ValidationFailure, ValidationOutcome
from .validator import validate

Serializable = tuple[str, Any]


class SerializationMode(Enum):
    """Shape of a field's failures in serialized output."""

    LIST = "list"
    MAP = "map"


def failures_to_json(
    failures: Sequence[ValidationFailure],
    mode: SerializationMode = SerializationMode.MAP,
) -> list[str] | dict[str, str]:
    """Convert a field's failures to the JSON shape for ``mode``.

    In map mode a later failure with a duplicate tag overwrites the earlier one.
    """
    if mode is SerializationMode.LIST:
        return [failure.message for failure in failures]
    return {failure.rule_tag: failure.message for failure in failures}


def to_serializable(
    outcome: ValidationOutcome,
    name_override: str = "",
    mode: SerializationMode = SerializationMode.MAP,
) -> Serializable:
    """Convert a validation outcome into a ``(name, json_value)`` pair.

    Args:
        outcome: Outcome to convert
        name_override: Name to report instead of the field's own, if non-empty
        mode: Shape of the failures

    Returns:
        The output name and ``None`` on success, or the failures in ``mode``
    """
    name = name_override or outcome.name
    if outcome.valid:
        return name, None
    return name, failures_to_json(outcome.failures, mode)


def to_serializable_list(
    fields: Iterable[Field],
    mode: SerializationMode = SerializationMode.MAP,
) -> list[Serializable]:
    """Validate each field and convert the outcomes, preserving input order."""
    return [to_serializable(validate(field), mode=mode) for field in fields]


def serializables_to_string(
    serializables: Iterable[Serializable],
    indent: int | None = None,
) -> str:
    """Render ``(name, json_value)`` pairs as a single JSON object.

    Names are object keys, so a repeated name keeps the position of its first
    pair and the value of its last one; earlier values are dropped.

    Args:
        serializables: Pairs to render, in output order
        indent: Optional indentation; compact output when None

    Returns:
        JSON object text

    Raises:
        SerializationError: If a value is not JSON-encodable
    """
    data = dict(serializables)
    separators = (",", ":") if indent is None else None
    try:
        return json.dumps(data, indent=indent, separators=separators)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Failed to render validation output as JSON: {e}",
            context={"names": list(data.keys()), "error": str(e)},
        ) from e


def has_errors(serializables: Iterable[Serializable]) -> bool:
    """Check whether any serialized entry holds failures (is not JSON null)."""
    return any(value is not None for _, value in serializables)
