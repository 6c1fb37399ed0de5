"""Helpers shared by special forms and primitives for inspecting runtime values."""

from __future__ import annotations

import math

from seval import LispValue
from seval.types.closure import Closure


def is_truthy(value: LispValue) -> bool:
    # Only false and nil are falsy; 0 and "" are true
    return not (value is None or value is False)


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: LispValue) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, Closure):
        return "function"
    return type(value).__name__


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def display_string(value: LispValue) -> str:
    """Render a value the way string-producing primitives see it.

    Integral floats print without a fractional part, so ``(str 4.0)`` and
    ``(str 4)`` agree.
    """
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if is_number(value):
        return _format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ",".join("" if v is None else display_string(v) for v in value)
    if isinstance(value, dict):
        inner = ", ".join(f"{k}: {display_string(v)}" for k, v in value.items())
        return "{" + inner + "}"
    return str(value)


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality that never confuses booleans with numbers."""
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(values_equal(a[k], b[k]) for k in a)
    if type(a) != type(b):
        return False
    return a == b
