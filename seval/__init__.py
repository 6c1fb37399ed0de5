# Core type aliases for seval's data model.
# We use plain Python types (None, int, float, bool, str, list, dict) to represent
# both parsed expressions and runtime values. Symbols are the only AST-specific type.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote parsed, immutable forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# - Environment: a plain dict of name -> LispValue; new scopes are shallow copies.

from typing import Any, Callable, Dict, List

# Runtime value alias
LispValue = Any
# Parsed expression alias
SExpression = Any
# One lexical scope
Environment = Dict[str, LispValue]

# Evaluator function type: (expr, env, depth) used by special forms
EvaluatorFn = Callable[..., LispValue]
# Primitive function: (evaluated args, caller env, evaluate callback) -> value
PrimitiveFn = Callable[[List[LispValue], Environment, Callable[[SExpression, Environment], LispValue]], LispValue]

from seval.errors import (  # noqa: E402
    SevalError,
    LexError,
    ParseError,
    RecursionLimitError,
    UnknownOperatorError,
    NotCallableError,
    NotAFunctionError,
)
from seval.types.symbol import Symbol  # noqa: E402
from seval.types.closure import Closure  # noqa: E402
from seval.reader.tokenizer import tokenize, Token, TokenKind  # noqa: E402
from seval.reader.parser import parse  # noqa: E402
from seval.reader.printer import to_source  # noqa: E402
from seval.config import EvaluatorOptions  # noqa: E402
from seval.evaluation.evaluator import (  # noqa: E402
    Evaluator,
    create_evaluator,
    get_default_evaluator,
    evaluate,
    evaluate_text,
)
from seval.builtin import DEFAULT_PRIMITIVES  # noqa: E402
from seval.serialization import serialize, deserialize  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "Environment",
    "EvaluatorFn",
    "PrimitiveFn",
    "SevalError",
    "LexError",
    "ParseError",
    "RecursionLimitError",
    "UnknownOperatorError",
    "NotCallableError",
    "NotAFunctionError",
    "Symbol",
    "Closure",
    "tokenize",
    "Token",
    "TokenKind",
    "parse",
    "to_source",
    "EvaluatorOptions",
    "Evaluator",
    "create_evaluator",
    "get_default_evaluator",
    "evaluate",
    "evaluate_text",
    "DEFAULT_PRIMITIVES",
    "serialize",
    "deserialize",
]
