"""Default primitive table.

Each module contributes its primitives through ``register(table)``. Every
primitive has the shape ``fn(args, env, evaluate) -> value``; the defaults only
look at ``args``.
"""

from types import MappingProxyType

from seval.builtin import (
    arithmetic,
    comparison,
    logic,
    strings,
    lists,
    objects,
    numeric,
    predicates,
    utility,
)

MODULES = (arithmetic, comparison, logic, strings, lists, objects, numeric, predicates, utility)


def default_table() -> dict:
    table: dict = {}
    for module in MODULES:
        module.register(table)
    return table


DEFAULT_PRIMITIVES = MappingProxyType(default_table())
