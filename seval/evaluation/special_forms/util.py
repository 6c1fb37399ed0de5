from __future__ import annotations

from seval import LispValue, SExpression
from seval.errors import SevalArityError, SevalTypeError
from seval.types.symbol import Symbol
from seval.types.values import display_string, type_name

BEGIN = Symbol("begin")


def binding_name(expr: SExpression) -> str:
    """Name bound by a parameter or let target: a symbol's name, or the text of a literal."""
    if isinstance(expr, Symbol):
        return expr.id
    return display_string(expr)


def implicit_begin(forms: list[SExpression]) -> SExpression:
    # No body -> nil; one form -> itself; several -> (begin ...)
    if not forms:
        return None
    if len(forms) == 1:
        return forms[0]
    return [BEGIN, *forms]


def require_arity(form: str, tail: list[SExpression], *counts: int) -> None:
    if len(tail) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise SevalArityError(f"{form} expects {expected} argument(s), got {len(tail)}")


def require_list(form: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise SevalTypeError(f"{form} expects a list, got {type_name(value)}")
    return value
