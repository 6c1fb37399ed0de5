"""Application engine for seval.

This module centralizes call semantics for the evaluator:
- Closures run their body in a fresh copy of the captured scope, with
  parameters bound positionally (extras ignored, missing left unbound).
- Primitives receive the evaluated arguments, the caller's scope and an
  evaluate callback that re-enters the evaluator one level deeper.

Special forms that invoke closures (apply, map, reduce, ...) go through here
too, so every call path counts depth the same way.
"""

from __future__ import annotations

from seval import Environment, EvaluatorFn, LispValue, PrimitiveFn, SExpression
from seval.types.closure import Closure


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """Invoke ``fn`` on already-evaluated ``args`` from evaluation depth ``depth``."""
    return evaluate_fn(fn.body, fn.bind(args), depth + 1)


def apply_primitive(
    fn: PrimitiveFn,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """Invoke a registered primitive.

    The callback lets primitives evaluate sub-expressions lazily or repeatedly;
    it is bound to ``depth + 1`` so primitives cannot escape the recursion bound.
    """

    def evaluate_callback(expr: SExpression, scope: Environment) -> LispValue:
        return evaluate_fn(expr, scope, depth + 1)

    return fn(args, env, evaluate_callback)
