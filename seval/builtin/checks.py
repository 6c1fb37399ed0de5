"""Argument validation shared by the default primitives."""

from __future__ import annotations

from typing import Any, Optional

from seval.errors import SevalArityError, SevalTypeError
from seval.types.values import is_number, type_name


def require_args(name: str, args: list[Any], minimum: int, maximum: Optional[int] = None) -> None:
    count = len(args)
    if count < minimum or (maximum is not None and count > maximum):
        if maximum is None:
            expected = f"at least {minimum}"
        elif minimum == maximum:
            expected = f"exactly {minimum}"
        else:
            expected = f"{minimum} to {maximum}"
        raise SevalArityError(f"{name} requires {expected} argument(s), got {count}")


def number_arg(name: str, value: Any) -> int | float:
    if not is_number(value):
        raise SevalTypeError(f"{name} expects a number, got {type_name(value)}")
    return value


def int_arg(name: str, value: Any) -> int:
    """An index-like argument: an int, or a float with no fractional part."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SevalTypeError(f"{name} expects an integer, got {type_name(value)}")
    return value


def string_arg(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise SevalTypeError(f"{name} expects a string, got {type_name(value)}")
    return value


def list_arg(name: str, value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise SevalTypeError(f"{name} expects a list, got {type_name(value)}")
    return value


def dict_arg(name: str, value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SevalTypeError(f"{name} expects an object, got {type_name(value)}")
    return value
