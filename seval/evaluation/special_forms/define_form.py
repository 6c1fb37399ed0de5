from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue
from seval.errors import SevalArityError, SevalSyntaxError
from seval.evaluation.special_forms.lambda_form import param_names
from seval.evaluation.special_forms.util import binding_name, implicit_begin
from seval.types.closure import Closure
from seval.types.environment import new_scope


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)

    Binds name in env itself (not a copy), so the binding outlives the call when
    env is the caller's top-level dict. Returns the bound value.
    """
    if not tail:
        raise SevalArityError("define requires a name")

    target = tail[0]
    if isinstance(target, list):
        if not target:
            raise SevalSyntaxError("define function form needs a name")
        name = binding_name(target[0])
        snapshot = new_scope(env)
        fn = Closure(param_names("define", target[1:]), implicit_begin(tail[1:]), snapshot)
        # The function sees its own name so it can recurse
        snapshot[name] = fn
        env[name] = fn
        return fn

    if len(tail) != 2:
        raise SevalArityError("define requires exactly 2 arguments")
    value = evaluate_fn(tail[1], env, depth + 1)
    env[binding_name(target)] = value
    return value
