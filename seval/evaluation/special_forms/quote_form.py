from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue
from seval.evaluation.special_forms.util import require_arity
from seval.types.symbol import Symbol


def quoted_value(expr: SExpression) -> LispValue:
    """Turn an unevaluated expression into a value.

    Values have no symbol variant, so symbols become their names. Lists are
    rebuilt, which also keeps the parsed tree from being shared with callers.
    """
    if isinstance(expr, Symbol):
        return expr.id
    if isinstance(expr, list):
        return [quoted_value(e) for e in expr]
    return expr


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, depth: int
) -> LispValue:
    require_arity("quote", tail, 1)
    return quoted_value(tail[0])
