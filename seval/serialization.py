"""
Conversion between expressions and JSON-like trees.

A JSON tree has no symbol type, so ``deserialize`` reads every string as a
symbol except the direct string operands of a ``quote`` form, and
``serialize`` writes symbols back as plain strings. String literals outside
``quote`` do not survive a round trip.
"""

from __future__ import annotations
from typing import Any

from seval import SExpression
from seval.types.symbol import Symbol

QUOTE = Symbol("quote")


def deserialize(tree: Any) -> SExpression:
    return _deserialize(tree, quoted=False)


def _deserialize(tree: Any, quoted: bool) -> SExpression:
    if isinstance(tree, list):
        if not tree:
            return []
        head = _deserialize(tree[0], False)
        # Nested lists start unquoted again, whatever their parent was
        operands_quoted = head is QUOTE
        return [head, *(_deserialize(item, operands_quoted) for item in tree[1:])]
    if isinstance(tree, str):
        return tree if quoted else Symbol(tree)
    return tree


def serialize(expr: SExpression) -> Any:
    if isinstance(expr, Symbol):
        return expr.id
    if isinstance(expr, list):
        return [serialize(item) for item in expr]
    return expr
