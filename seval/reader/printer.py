"""Render expressions back to source text."""

from __future__ import annotations

from seval import SExpression
from seval.types.symbol import Symbol

STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def quote_string(text: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(ch, ch) for ch in text) + '"'


def to_source(expr: SExpression) -> str:
    """Return source text that parses back to ``expr``.

    Symbols print as their bare name and strings print quoted, so for trees
    made of numbers, booleans, symbols and lists ``parse(to_source(e)) == e``.
    """
    if expr is None:
        return "null"
    if expr is True:
        return "true"
    if expr is False:
        return "false"
    if isinstance(expr, Symbol):
        return expr.id
    if isinstance(expr, str):
        return quote_string(expr)
    if isinstance(expr, (int, float)):
        return repr(expr)
    if isinstance(expr, list):
        return "(" + " ".join(to_source(e) for e in expr) + ")"
    return str(expr)
