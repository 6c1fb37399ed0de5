"""Special form: cond, the multi-branch conditional."""

from seval import EvaluatorFn, Environment
from seval import SExpression, LispValue
from seval.errors import SevalSyntaxError
from seval.types.symbol import Symbol
from seval.types.values import is_truthy

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """Evaluate a (cond (test expr...) ... (else expr...)).

    For each clause in order:
    - If the test is the symbol `else`, the clause matches without evaluating anything.
    - Otherwise evaluate the test; if truthy the clause matches.
    - A matching clause evaluates its body in sequence and returns the last value.
      A clause with only a test returns the test's value.
    If no clause matches, return nil.
    """
    for clause in tail:
        if not isinstance(clause, list) or not clause:
            raise SevalSyntaxError(f"cond clause must be a non-empty list, got {clause!r}")
        test, *body = clause

        if test == ELSE:
            test_val = None
        else:
            test_val = evaluate_fn(test, env, depth + 1)
            if not is_truthy(test_val):
                continue

        result = test_val
        for expr in body:
            result = evaluate_fn(expr, env, depth + 1)
        return result

    # No clause matched
    return None
