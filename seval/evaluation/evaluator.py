"""Core tree-walking evaluator for seval.

Implements depth-bounded evaluation of parsed expressions, special-form
dispatch, and application of closures and registered primitives.

Dispatch for a non-empty list (first match wins):
  1. special form named by the head symbol
  2. closure bound to the head symbol's name in the current scope
  3. primitive registered under the head symbol's name
  4. head expression evaluating to a closure
  5. UnknownOperatorError

A symbol with no binding evaluates to its own name as a string. This lets an
operator name travel as data, but it also means a misspelt variable turns into
a string instead of failing; callers should validate results accordingly.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Mapping, Optional

from seval import Environment, LispValue, PrimitiveFn, SExpression
from seval.builtin import DEFAULT_PRIMITIVES
from seval.config import MAX_DEPTH_VAR, EvaluatorOptions
from seval.errors import RecursionLimitError, SevalTypeError, UnknownOperatorError
from seval.evaluation.apply import apply_closure, apply_primitive
from seval.evaluation.registry import PrimitiveRegistry
from seval.evaluation.special_forms import SPECIAL_FORM_HANDLERS, special_form_for
from seval.reader.parser import parse
from seval.reader.printer import to_source
from seval.types.closure import Closure
from seval.types.symbol import Symbol

logger = logging.getLogger(__name__)

ATOM_TYPES = (bool, int, float, str, Closure)


class Evaluator:
    """Evaluates expressions against a scope and a fixed primitive registry.

    An Evaluator holds no per-evaluation state: depth travels down the call
    chain, so one instance may serve independent evaluations concurrently as
    long as they do not share an environment dict.
    """

    def __init__(self, options: Optional[EvaluatorOptions] = None):
        if options is None:
            options = EvaluatorOptions()
        self.max_depth: int = options.resolved_max_depth()
        self.primitives = PrimitiveRegistry(DEFAULT_PRIMITIVES, options.primitives)
        logger.debug(
            "Evaluator initialized: max_depth=%d, %d primitives", self.max_depth, len(self.primitives)
        )

    def evaluate(self, expr: SExpression, env: Optional[Environment] = None) -> LispValue:
        """Evaluate a parsed expression.

        ``env`` is used by reference: a top-level ``define`` is visible in it
        after the call returns. None means a fresh, empty scope.
        """
        if env is None:
            env = {}
        try:
            return self.eval(expr, env, 0)
        except RecursionError:
            # Each depth step costs several Python frames, so a large max_depth
            # can exhaust the interpreter stack before the depth check fires
            logger.warning("Python stack exhausted below max_depth=%d", self.max_depth)
            raise RecursionLimitError(self.max_depth) from None

    def evaluate_text(self, source: str, env: Optional[Environment] = None) -> LispValue:
        """Parse ``source`` as one expression and evaluate it."""
        logger.debug("Evaluating source: %.100s", source)
        return self.evaluate(parse(source), env)

    def eval(self, expr: SExpression, env: Environment, depth: int) -> LispValue:
        if depth > self.max_depth:
            raise RecursionLimitError(self.max_depth)

        # --- Atoms return as-is ---
        if expr is None or isinstance(expr, ATOM_TYPES):
            return expr

        if isinstance(expr, Symbol):
            name = expr.id
            if name in env:
                return env[name]
            return name

        if isinstance(expr, list):
            if not expr:
                return []
            return self.eval_list(expr, env, depth)

        raise SevalTypeError(f"Cannot evaluate: {expr!r}")

    def eval_list(self, expr: list[SExpression], env: Environment, depth: int) -> LispValue:
        head, *tail = expr

        if isinstance(head, Symbol):
            # --- Special forms handling ---
            form = special_form_for(head)
            if form is not None:
                return SPECIAL_FORM_HANDLERS[form](tail, env, self.eval, depth)

            bound = env.get(head.id)
            if isinstance(bound, Closure):
                args = self.eval_args(tail, env, depth)
                return apply_closure(bound, args, self.eval, depth)

            primitive = self.primitives.get(head.id)
            if primitive is not None:
                args = self.eval_args(tail, env, depth)
                return apply_primitive(primitive, args, env, self.eval, depth)

        # Head may be an expression producing a closure, e.g. ((lambda (x) x) 1)
        callee = self.eval(head, env, depth + 1)
        if isinstance(callee, Closure):
            args = self.eval_args(tail, env, depth)
            return apply_closure(callee, args, self.eval, depth)

        name = head.id if isinstance(head, Symbol) else to_source(head)
        raise UnknownOperatorError(name)

    def eval_args(self, tail: list[SExpression], env: Environment, depth: int) -> list[LispValue]:
        # Strict, left to right, in the caller's scope
        return [self.eval(arg, env, depth + 1) for arg in tail]


def create_evaluator(
    primitives: Optional[Mapping[str, PrimitiveFn]] = None,
    max_depth: Optional[int] = None,
) -> Evaluator:
    """Build an evaluator whose registry is the defaults merged with ``primitives``."""
    return Evaluator(EvaluatorOptions(primitives=primitives, max_depth=max_depth))


@lru_cache(maxsize=1)
def _evaluator_for(raw_max_depth: Optional[str]) -> Evaluator:
    return create_evaluator()


def get_default_evaluator() -> Evaluator:
    """The shared default evaluator, built on first use.

    SEVAL_MAX_DEPTH is read on every call; a changed value yields a new
    evaluator and a bad value raises here rather than at import.
    """
    return _evaluator_for(os.environ.get(MAX_DEPTH_VAR))


def evaluate(expr: SExpression, env: Optional[Environment] = None) -> LispValue:
    """Evaluate a parsed expression with the default evaluator."""
    return get_default_evaluator().evaluate(expr, env)


def evaluate_text(source: str, env: Optional[Environment] = None) -> LispValue:
    """Parse and evaluate ``source`` with the default evaluator."""
    return get_default_evaluator().evaluate_text(source, env)
