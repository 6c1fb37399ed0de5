from __future__ import annotations
from typing import Any

from seval.builtin.checks import require_args
from seval.types.values import is_truthy


# -------------------------------
# Boolean logic
# -------------------------------
# Arguments arrive already evaluated, so these do not short-circuit.
def logical_and(args: list[Any], *_) -> bool:
    return all(is_truthy(a) for a in args)


def logical_or(args: list[Any], *_) -> bool:
    return any(is_truthy(a) for a in args)


def logical_not(args: list[Any], *_) -> bool:
    require_args("not", args, 1, 1)
    return not is_truthy(args[0])


def register(table: dict):
    table.update({
        'and': logical_and,
        'or': logical_or,
        'not': logical_not,
    })
