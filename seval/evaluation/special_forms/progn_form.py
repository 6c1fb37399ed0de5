from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    # All forms share env, so a define in one is visible to the next
    result: LispValue = None
    for e in tail:
        result = evaluate_fn(e, env, depth + 1)
    return result
