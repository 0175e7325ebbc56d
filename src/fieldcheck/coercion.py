"""Value coercion for the four scalar kinds.

Every conversion is explicit and closed over ``int``, ``float``, ``str`` and
``bool``. Coercion never raises: a value that cannot be converted yields the
kind's zero value and a failed ``CoercionResult``. This is a safety net for
the typed field constructors, not a way to reject malformed input.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

#: Returned by ``stringify`` for values outside the supported scalar kinds.
UNREPRESENTABLE = "<unrepresentable>"

_TRUE_STRINGS = frozenset({"true", "1", "yes", "y", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "n", "off"})

_ZERO_VALUES: dict[type, Any] = {
    int: 0,
    float: 0.0,
    str: "",
    bool: False,
}


@dataclass(frozen=True)
class CoercionResult:
    """Outcome of a single coercion: the value and whether conversion succeeded."""

    value: Any
    ok: bool

    def __bool__(self) -> bool:
        return self.ok


def zero_value(target_type: type) -> Any:
    """Get the zero value of a scalar type (0, 0.0, "", False).

    Raises:
        TypeError: If the type is not one of the four scalar kinds
    """
    try:
        return _ZERO_VALUES[target_type]
    except KeyError:
        raise TypeError(f"Unsupported scalar type: {target_type!r}") from None


def coerce_int(raw: Any) -> CoercionResult:
    if isinstance(raw, bool):
        return CoercionResult(0, False)
    if isinstance(raw, int):
        return CoercionResult(raw, True)
    if isinstance(raw, float):
        # Only lossless conversions
        if math.isfinite(raw) and raw == int(raw):
            return CoercionResult(int(raw), True)
        return CoercionResult(0, False)
    if isinstance(raw, str):
        try:
            return CoercionResult(int(raw.strip()), True)
        except ValueError:
            return CoercionResult(0, False)
    return CoercionResult(0, False)


def coerce_float(raw: Any) -> CoercionResult:
    if isinstance(raw, bool):
        return CoercionResult(0.0, False)
    if isinstance(raw, (int, float)):
        try:
            return CoercionResult(float(raw), True)
        except OverflowError:
            return CoercionResult(0.0, False)
    if isinstance(raw, str):
        try:
            return CoercionResult(float(raw.strip()), True)
        except ValueError:
            return CoercionResult(0.0, False)
    return CoercionResult(0.0, False)


def coerce_str(raw: Any) -> CoercionResult:
    if isinstance(raw, str):
        return CoercionResult(raw, True)
    return CoercionResult("", False)


def coerce_bool(raw: Any) -> CoercionResult:
    if isinstance(raw, bool):
        return CoercionResult(raw, True)
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in _TRUE_STRINGS:
            return CoercionResult(True, True)
        if text in _FALSE_STRINGS:
            return CoercionResult(False, True)
    return CoercionResult(False, False)


_COERCERS: dict[type, Callable[[Any], CoercionResult]] = {
    int: coerce_int,
    float: coerce_float,
    str: coerce_str,
    bool: coerce_bool,
}


def try_coerce(raw: Any, target_type: type) -> CoercionResult:
    """Coerce a value to a scalar type, reporting whether it succeeded.

    Args:
        raw: Value to coerce
        target_type: One of ``int``, ``float``, ``str``, ``bool``

    Returns:
        CoercionResult with the converted value, or the zero value and ``ok=False``

    Raises:
        TypeError: If the target type is not a supported scalar kind
    """
    coercer = _COERCERS.get(target_type)
    if coercer is None:
        raise TypeError(f"Unsupported scalar type: {target_type!r}")
    return coercer(raw)


def coerce(raw: Any, target_type: type) -> Any:
    """Best-effort conversion to a scalar type, falling back to its zero value.

    Args:
        raw: Value to coerce
        target_type: One of ``int``, ``float``, ``str``, ``bool``

    Returns:
        The converted value, or the zero value of ``target_type`` on mismatch
    """
    result = try_coerce(raw, target_type)
    if not result.ok:
        logger.warning(
            f"Cannot coerce {type(raw).__name__} value {raw!r} to {target_type.__name__}, "
            f"using {result.value!r}"
        )
    return result.value


def stringify(value: Any) -> str:
    """Render a supported scalar as its canonical text form.

    Integers and floats render as decimal text (``18.0`` stays ``18.0``),
    booleans as ``true``/``false`` and strings unchanged. Anything else
    yields ``UNREPRESENTABLE``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    return UNREPRESENTABLE
