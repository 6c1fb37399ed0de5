from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue
from seval.errors import SevalArityError, SevalSyntaxError
from seval.evaluation.special_forms.util import binding_name, implicit_begin
from seval.types.closure import Closure
from seval.types.environment import new_scope


def param_names(form: str, params: SExpression) -> list[str]:
    if not isinstance(params, list):
        raise SevalSyntaxError(f"{form} parameters must be a list, got {params!r}")
    return [binding_name(p) for p in params]


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    # (lambda (params) body...) allows zero or more body forms.
    # Several forms run in sequence; no forms means calling the closure yields nil.
    # The closure captures a copy of env, so later defines in env stay invisible to it.
    if not tail:
        raise SevalArityError("lambda requires at least a parameter list")

    params = param_names("lambda", tail[0])
    return Closure(params, implicit_begin(tail[1:]), new_scope(env))
