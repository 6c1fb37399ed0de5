from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue
from seval.errors import NotAFunctionError, SevalArityError, SevalSyntaxError
from seval.evaluation.apply import apply_closure
from seval.evaluation.special_forms.util import binding_name, require_list
from seval.types.closure import Closure
from seval.types.environment import new_scope


def reduce_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    Left fold, seeded with init, one step per item in order.

    (reduce list init (acc item) body)   inline form
    (reduce list init fn)                function form; fn takes (acc item)
    """
    if len(tail) not in (3, 4):
        raise SevalArityError(
            "reduce expects (reduce list init fn) or (reduce list init (acc item) body)"
        )
    list_expr, init_expr, *rest = tail
    items = require_list("reduce", evaluate_fn(list_expr, env, depth + 1))
    acc = evaluate_fn(init_expr, env, depth + 1)

    if len(rest) == 2:
        params, body = rest
        if not isinstance(params, list) or len(params) != 2:
            raise SevalSyntaxError("reduce inline form needs exactly two names: (acc item)")
        acc_name, item_name = binding_name(params[0]), binding_name(params[1])
        for item in items:
            scope = new_scope(env, ((acc_name, acc), (item_name, item)))
            acc = evaluate_fn(body, scope, depth + 1)
        return acc

    fn = evaluate_fn(rest[0], env, depth + 1)
    if not isinstance(fn, Closure):
        raise NotAFunctionError(f"reduce requires a function, got {fn!r}")
    for item in items:
        acc = apply_closure(fn, [acc, item], evaluate_fn, depth)
    return acc
