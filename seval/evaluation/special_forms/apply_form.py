from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue
from seval.errors import NotCallableError, SevalTypeError
from seval.evaluation.apply import apply_closure
from seval.evaluation.special_forms.util import require_arity
from seval.types.closure import Closure
from seval.types.values import type_name


def apply_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    (apply fn args)
    Calls a closure with the elements of a list as its positional arguments.
    Like any closure call, missing arguments stay unbound and extras are ignored.
    """
    require_arity("apply", tail, 2)
    fn_expr, args_expr = tail

    fn_val = evaluate_fn(fn_expr, env, depth + 1)
    args_val = evaluate_fn(args_expr, env, depth + 1)

    if not isinstance(fn_val, Closure):
        raise NotCallableError(f"Cannot apply non-function: {fn_val!r}")
    if not isinstance(args_val, list):
        raise SevalTypeError(f"apply arguments must evaluate to a list, got {type_name(args_val)}")

    return apply_closure(fn_val, list(args_val), evaluate_fn, depth)
