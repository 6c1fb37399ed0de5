from __future__ import annotations

import re
from typing import Any

from seval.builtin.checks import int_arg, list_arg, require_args, string_arg
from seval.types.values import display_string

NUMBER_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


# -------------------------------
# Construction and conversion
# -------------------------------
def concat(args: list[Any], *_) -> str:
    return "".join(display_string(a) for a in args)


def to_str(args: list[Any], *_) -> str:
    require_args("str", args, 1, 1)
    return display_string(args[0])


def parse_num(args: list[Any], *_) -> Any:
    """Leading decimal number in the text, or 0 when there is none."""
    require_args("parse-num", args, 1, 1)
    m = NUMBER_PREFIX_RE.match(display_string(args[0]))
    if not m:
        return 0
    text = m.group(1)
    if "." in text or "e" in text.lower():
        return float(text)
    return int(text)


def parse_int(args: list[Any], *_) -> int:
    """Leading integer in the given radix (default 10), or 0 when there is none."""
    require_args("parse-int", args, 1, 2)
    radix = 10
    if len(args) > 1 and args[1]:
        radix = int_arg("parse-int", args[1])
        if not 2 <= radix <= 36:
            return 0
    text = display_string(args[0]).strip()
    sign = 1
    if text and text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if radix == 16 and text[:2].lower() == "0x":
        text = text[2:]
    valid = DIGITS[:radix]
    end = 0
    while end < len(text) and text[end].lower() in valid:
        end += 1
    if end == 0:
        return 0
    return sign * int(text[:end], radix)


# -------------------------------
# Inspection
# -------------------------------
def strlen(args: list[Any], *_) -> int:
    require_args("strlen", args, 1, 1)
    return len(string_arg("strlen", args[0]))


def starts_with(args: list[Any], *_) -> bool:
    require_args("str-starts-with", args, 2, 2)
    return string_arg("str-starts-with", args[0]).startswith(string_arg("str-starts-with", args[1]))


def ends_with(args: list[Any], *_) -> bool:
    require_args("str-ends-with", args, 2, 2)
    return string_arg("str-ends-with", args[0]).endswith(string_arg("str-ends-with", args[1]))


def contains(args: list[Any], *_) -> bool:
    require_args("str-contains", args, 2, 2)
    return string_arg("str-contains", args[1]) in string_arg("str-contains", args[0])


# -------------------------------
# Transformation
# -------------------------------
def substr(args: list[Any], *_) -> str:
    # Indices are clamped to the string and swapped if reversed
    require_args("substr", args, 2, 3)
    text = string_arg("substr", args[0])
    size = len(text)
    start = min(max(int_arg("substr", args[1]), 0), size)
    end = size
    if len(args) > 2 and args[2] is not None:
        end = min(max(int_arg("substr", args[2]), 0), size)
    if start > end:
        start, end = end, start
    return text[start:end]


def replace(args: list[Any], *_) -> str:
    # First occurrence only
    require_args("str-replace", args, 3, 3)
    text, old, new = (string_arg("str-replace", a) for a in args)
    return text.replace(old, new, 1)


def split(args: list[Any], *_) -> list[str]:
    require_args("str-split", args, 2, 2)
    text = string_arg("str-split", args[0])
    sep = string_arg("str-split", args[1])
    if sep == "":
        return list(text)
    return text.split(sep)


def join(args: list[Any], *_) -> str:
    require_args("str-join", args, 1, 2)
    items = list_arg("str-join", args[0])
    sep = "," if len(args) < 2 or args[1] is None else display_string(args[1])
    return sep.join("" if item is None else display_string(item) for item in items)


def trim(args: list[Any], *_) -> str:
    require_args("str-trim", args, 1, 1)
    return string_arg("str-trim", args[0]).strip()


def upper(args: list[Any], *_) -> str:
    require_args("str-upper", args, 1, 1)
    return string_arg("str-upper", args[0]).upper()


def lower(args: list[Any], *_) -> str:
    require_args("str-lower", args, 1, 1)
    return string_arg("str-lower", args[0]).lower()


def register(table: dict):
    table.update({
        'concat': concat,
        'str': to_str,
        'strlen': strlen,
        'substr': substr,
        'str-starts-with': starts_with,
        'str-ends-with': ends_with,
        'str-contains': contains,
        'str-replace': replace,
        'str-split': split,
        'str-join': join,
        'str-trim': trim,
        'str-upper': upper,
        'str-lower': lower,
        'parse-num': parse_num,
        'parse-int': parse_int,
    })
