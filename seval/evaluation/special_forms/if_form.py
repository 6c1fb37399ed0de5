from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue
from seval.evaluation.special_forms.util import require_arity
from seval.types.values import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    require_arity("if", tail, 2, 3)

    cond = evaluate_fn(tail[0], env, depth + 1)
    # Only false and nil are falsy
    if is_truthy(cond):
        return evaluate_fn(tail[1], env, depth + 1)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, depth + 1)
    else:
        return None
