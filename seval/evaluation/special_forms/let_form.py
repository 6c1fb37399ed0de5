from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue
from seval.errors import SevalArityError, SevalSyntaxError
from seval.evaluation.special_forms.util import binding_name, implicit_begin
from seval.types.environment import new_scope


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    (let ((name expr) ...) body...)
    Bindings are made left to right into a copy of the current scope; each
    initializer sees the bindings before it, never the ones after.
    """
    if not tail:
        raise SevalArityError("let requires a binding list")

    bindings = tail[0]
    if not isinstance(bindings, list):
        raise SevalSyntaxError("let bindings must be a list of (name expr) pairs")

    scope = new_scope(env)
    for binding in bindings:
        if not isinstance(binding, list) or len(binding) != 2:
            raise SevalSyntaxError(f"Malformed let binding: {binding!r}")
        name_expr, value_expr = binding
        scope[binding_name(name_expr)] = evaluate_fn(value_expr, scope, depth + 1)

    return evaluate_fn(implicit_begin(tail[1:]), scope, depth + 1)
