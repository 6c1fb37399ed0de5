"""Special forms over lists: filter, map, find, find-index, sort-by, count.

Each takes a list operand and a per-item function, which may be given as

- a closure: ``(map (lambda (x) (* x 2)) xs)`` or ``(map double xs)``; the item
  is bound to the closure's first parameter inside its captured scope;
- an inline expression: ``(filter (> @ 2) xs)``; evaluated once per item in a
  copy of the current scope with the item bound as both ``@`` and ``it``.

A symbol or a lambda literal in function position is evaluated once up front
and used as a closure if it yields one. Any other expression is treated as
inline; if an inline result is itself a closure, it is called with the item.
"""

from __future__ import annotations

from typing import Callable

from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue
from seval.errors import SevalTypeError
from seval.evaluation.apply import apply_closure
from seval.evaluation.special_forms.util import require_arity, require_list
from seval.types.closure import Closure
from seval.types.environment import item_scope
from seval.types.symbol import Symbol
from seval.types.values import is_truthy

LAMBDA_HEADS = (Symbol("lambda"), Symbol("fn"))

ItemFn = Callable[[LispValue], LispValue]


def _is_function_literal(expr: SExpression) -> bool:
    if isinstance(expr, Symbol):
        return True
    return isinstance(expr, list) and bool(expr) and expr[0] in LAMBDA_HEADS


def item_function(
    expr: SExpression, env: Environment, evaluate_fn: EvaluatorFn, depth: int
) -> ItemFn:
    """Build the per-item callable for ``expr`` (closure form or inline form)."""
    if _is_function_literal(expr):
        candidate = evaluate_fn(expr, env, depth + 1)
        if isinstance(candidate, Closure):
            return lambda item: apply_closure(candidate, [item], evaluate_fn, depth)

    def inline(item: LispValue) -> LispValue:
        result = evaluate_fn(expr, item_scope(env, item), depth + 1)
        if isinstance(result, Closure):
            return apply_closure(result, [item], evaluate_fn, depth)
        return result

    return inline


def _items(form: str, expr: SExpression, env: Environment, evaluate_fn: EvaluatorFn, depth: int):
    return require_list(form, evaluate_fn(expr, env, depth + 1))


def filter_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, depth: int) -> LispValue:
    """(filter pred list)"""
    require_arity("filter", tail, 2)
    pred_expr, list_expr = tail
    pred = item_function(pred_expr, env, evaluate_fn, depth)
    items = _items("filter", list_expr, env, evaluate_fn, depth)
    return [item for item in items if is_truthy(pred(item))]


def map_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, depth: int) -> LispValue:
    """(map fn list)"""
    require_arity("map", tail, 2)
    fn_expr, list_expr = tail
    fn = item_function(fn_expr, env, evaluate_fn, depth)
    items = _items("map", list_expr, env, evaluate_fn, depth)
    return [fn(item) for item in items]


def find_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, depth: int) -> LispValue:
    """(find list pred) -> first matching item, or nil"""
    require_arity("find", tail, 2)
    list_expr, pred_expr = tail
    items = _items("find", list_expr, env, evaluate_fn, depth)
    pred = item_function(pred_expr, env, evaluate_fn, depth)
    for item in items:
        if is_truthy(pred(item)):
            return item
    return None


def find_index_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, depth: int) -> LispValue:
    """(find-index list pred) -> index of first matching item, or -1"""
    require_arity("find-index", tail, 2)
    list_expr, pred_expr = tail
    items = _items("find-index", list_expr, env, evaluate_fn, depth)
    pred = item_function(pred_expr, env, evaluate_fn, depth)
    for index, item in enumerate(items):
        if is_truthy(pred(item)):
            return index
    return -1


def sort_by_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, depth: int) -> LispValue:
    """(sort-by list key) -> new list ordered ascending by key"""
    require_arity("sort-by", tail, 2)
    list_expr, key_expr = tail
    items = _items("sort-by", list_expr, env, evaluate_fn, depth)
    key = item_function(key_expr, env, evaluate_fn, depth)
    keyed = [(key(item), index, item) for index, item in enumerate(items)]
    try:
        keyed.sort(key=lambda entry: (entry[0], entry[1]))
    except TypeError as ex:
        raise SevalTypeError(f"sort-by keys are not comparable: {ex}") from ex
    return [item for _, _, item in keyed]


def count_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, depth: int) -> LispValue:
    """(count list) or (count list pred)"""
    require_arity("count", tail, 1, 2)
    items = _items("count", tail[0], env, evaluate_fn, depth)
    if len(tail) == 1:
        return len(items)
    pred = item_function(tail[1], env, evaluate_fn, depth)
    return sum(1 for item in items if is_truthy(pred(item)))
