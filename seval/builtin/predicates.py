from __future__ import annotations
from typing import Any

from seval.builtin.checks import require_args
from seval.types.values import is_number


def _predicate(name: str, test):
    def check(args: list[Any], *_) -> bool:
        require_args(name, args, 1, 1)
        return test(args[0])
    check.__name__ = name
    return check


def register(table: dict):
    table.update({
        'null?': _predicate("null?", lambda v: v is None),
        'number?': _predicate("number?", is_number),
        'string?': _predicate("string?", lambda v: isinstance(v, str)),
        'bool?': _predicate("bool?", lambda v: isinstance(v, bool)),
        'list?': _predicate("list?", lambda v: isinstance(v, list)),
        'object?': _predicate("object?", lambda v: isinstance(v, dict)),
    })
