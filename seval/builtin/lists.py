from __future__ import annotations
from typing import Any

from seval.builtin.checks import int_arg, list_arg, number_arg, require_args
from seval.errors import SevalTypeError
from seval.types.values import type_name, values_equal


# -------------------------------
# Construction
# -------------------------------
def list_builtin(args: list[Any], *_) -> list[Any]:
    return list(args)


def range_builtin(args: list[Any], *_) -> list[Any]:
    """(range end), (range start end) or (range start end step); a zero step counts as 1."""
    require_args("range", args, 1, 3)
    if len(args) == 1:
        start, end = 0, number_arg("range", args[0])
    else:
        start, end = number_arg("range", args[0]), number_arg("range", args[1])
    step = number_arg("range", args[2]) if len(args) > 2 else 1
    if step == 0:
        step = 1
    result = []
    i = start
    while (i < end) if step > 0 else (i > end):
        result.append(i)
        i += step
    return result


# -------------------------------
# Access
# -------------------------------
def length(args: list[Any], *_) -> int:
    require_args("length", args, 1, 1)
    value = args[0]
    if not isinstance(value, (list, str)):
        raise SevalTypeError(f"length expects a list or string, got {type_name(value)}")
    return len(value)


def first(args: list[Any], *_) -> Any:
    require_args("first", args, 1, 1)
    items = list_arg("first", args[0])
    return items[0] if items else None


def rest(args: list[Any], *_) -> list[Any]:
    require_args("rest", args, 1, 1)
    return list_arg("rest", args[0])[1:]


def last(args: list[Any], *_) -> Any:
    require_args("last", args, 1, 1)
    items = list_arg("last", args[0])
    return items[-1] if items else None


def nth(args: list[Any], *_) -> Any:
    # Out-of-range (including negative) indices give nil
    require_args("nth", args, 2, 2)
    items = list_arg("nth", args[0])
    index = int_arg("nth", args[1])
    if 0 <= index < len(items):
        return items[index]
    return None


def slice_builtin(args: list[Any], *_) -> list[Any]:
    require_args("slice", args, 1, 3)
    items = list_arg("slice", args[0])
    start = int_arg("slice", args[1]) if len(args) > 1 and args[1] is not None else 0
    end = int_arg("slice", args[2]) if len(args) > 2 and args[2] is not None else None
    return items[start:end]


# -------------------------------
# Derived lists (inputs are never mutated)
# -------------------------------
def append(args: list[Any], *_) -> list[Any]:
    require_args("append", args, 2, 2)
    return [*list_arg("append", args[0]), args[1]]


def prepend(args: list[Any], *_) -> list[Any]:
    require_args("prepend", args, 2, 2)
    return [args[1], *list_arg("prepend", args[0])]


def concat_lists(args: list[Any], *_) -> list[Any]:
    result: list[Any] = []
    for items in args:
        result.extend(list_arg("concat-lists", items))
    return result


def reverse(args: list[Any], *_) -> list[Any]:
    require_args("reverse", args, 1, 1)
    return list_arg("reverse", args[0])[::-1]


# -------------------------------
# Search
# -------------------------------
def is_empty(args: list[Any], *_) -> bool:
    require_args("empty?", args, 1, 1)
    value = args[0]
    if not isinstance(value, (list, str)):
        raise SevalTypeError(f"empty? expects a list or string, got {type_name(value)}")
    return len(value) == 0


def contains(args: list[Any], *_) -> bool:
    require_args("contains", args, 2, 2)
    return index_of(args) != -1


def index_of(args: list[Any], *_) -> int:
    require_args("index-of", args, 2, 2)
    haystack, needle = args
    if isinstance(haystack, str):
        if not isinstance(needle, str):
            return -1
        return haystack.find(needle)
    for i, item in enumerate(list_arg("index-of", haystack)):
        if values_equal(item, needle):
            return i
    return -1


def register(table: dict):
    table.update({
        'list': list_builtin,
        'length': length,
        'first': first,
        'rest': rest,
        'last': last,
        'nth': nth,
        'append': append,
        'prepend': prepend,
        'concat-lists': concat_lists,
        'slice': slice_builtin,
        'reverse': reverse,
        'range': range_builtin,
        'empty?': is_empty,
        'contains': contains,
        'index-of': index_of,
    })
