from __future__ import annotations
from typing import Any, Callable

from seval.builtin.checks import require_args
from seval.errors import SevalTypeError
from seval.types.values import type_name, values_equal


# -------------------------------
# Equality
# -------------------------------
def equals(args: list[Any], *_) -> bool:
    require_args("=", args, 2, 2)
    return values_equal(args[0], args[1])


def not_equals(args: list[Any], *_) -> bool:
    require_args("!=", args, 2, 2)
    return not values_equal(args[0], args[1])


# -------------------------------
# Ordering
# -------------------------------
def _ordering(name: str, op: Callable[[Any, Any], bool]):
    def compare(args: list[Any], *_) -> bool:
        require_args(name, args, 2, 2)
        a, b = args
        try:
            return op(a, b)
        except TypeError:
            raise SevalTypeError(f"Cannot compare {type_name(a)} with {type_name(b)} using {name}")
    compare.__name__ = f"compare_{name}"
    return compare


lt = _ordering("<", lambda a, b: a < b)
gt = _ordering(">", lambda a, b: a > b)
lte = _ordering("<=", lambda a, b: a <= b)
gte = _ordering(">=", lambda a, b: a >= b)


# -------------------------------
# Registration
# -------------------------------
def register(table: dict):
    table.update({
        '=': equals,
        '!=': not_equals,
        '<': lt,
        '>': gt,
        '<=': lte,
        '>=': gte,
    })
