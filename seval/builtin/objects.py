from __future__ import annotations
from typing import Any

from seval.builtin.checks import dict_arg, int_arg, list_arg, require_args
from seval.errors import SevalTypeError
from seval.types.values import display_string, is_number


def property_key(key: Any) -> str:
    # Object keys are always strings: (obj 1 "a") has key "1"
    return key if isinstance(key, str) else display_string(key)


# -------------------------------
# Construction
# -------------------------------
def obj(args: list[Any], *_) -> dict[str, Any]:
    """(obj k1 v1 k2 v2 ...); a trailing key without a value maps to nil."""
    result: dict[str, Any] = {}
    for i in range(0, len(args), 2):
        result[property_key(args[i])] = args[i + 1] if i + 1 < len(args) else None
    return result


# -------------------------------
# Access
# -------------------------------
def get(args: list[Any], *_) -> Any:
    """(get target key...) walks nested objects and lists; any miss gives nil."""
    require_args("get", args, 1)
    current = args[0]
    for key in args[1:]:
        if current is None:
            return None
        if isinstance(current, dict):
            current = current.get(property_key(key))
        elif isinstance(current, (list, str)):
            if not is_number(key) or (isinstance(key, float) and not key.is_integer()):
                return None
            index = int(key)
            current = current[index] if 0 <= index < len(current) else None
        else:
            return None
    return current


def keys(args: list[Any], *_) -> list[str]:
    require_args("keys", args, 1, 1)
    return list(dict_arg("keys", args[0]).keys())


def values(args: list[Any], *_) -> list[Any]:
    require_args("values", args, 1, 1)
    return list(dict_arg("values", args[0]).values())


def has_key(args: list[Any], *_) -> bool:
    require_args("has-key", args, 2, 2)
    return property_key(args[1]) in dict_arg("has-key", args[0])


# -------------------------------
# Derived containers (inputs are never mutated)
# -------------------------------
def set_key(args: list[Any], *_) -> dict[str, Any]:
    require_args("set", args, 3, 3)
    target = {} if args[0] is None else dict_arg("set", args[0])
    result = dict(target)
    result[property_key(args[1])] = args[2]
    return result


def update_at(args: list[Any], *_) -> list[Any]:
    # Writing past the end pads with nil
    require_args("update-at", args, 3, 3)
    result = list(list_arg("update-at", args[0]))
    index = int_arg("update-at", args[1])
    if index < 0:
        raise SevalTypeError(f"update-at index must be non-negative, got {index}")
    if index >= len(result):
        result.extend([None] * (index - len(result) + 1))
    result[index] = args[2]
    return result


def merge(args: list[Any], *_) -> dict[str, Any]:
    # Later objects win; nil arguments are skipped
    result: dict[str, Any] = {}
    for item in args:
        if item is None:
            continue
        result.update(dict_arg("merge", item))
    return result


def register(table: dict):
    table.update({
        'obj': obj,
        'get': get,
        'set': set_key,
        'keys': keys,
        'values': values,
        'has-key': has_key,
        'update-at': update_at,
        'merge': merge,
    })
