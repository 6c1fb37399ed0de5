from __future__ import annotations

import math
import random
from typing import Any, Callable

from seval.builtin.checks import number_arg, require_args
from seval.errors import SevalArithmeticError


def _unary(name: str, fn: Callable[[float], Any]):
    def apply(args: list[Any], *_) -> Any:
        require_args(name, args, 1, 1)
        x = number_arg(name, args[0])
        try:
            return fn(x)
        except (ValueError, OverflowError) as ex:
            raise SevalArithmeticError(f"{name}: {ex}") from ex
    apply.__name__ = name
    return apply


# -------------------------------
# Rounding and sign
# -------------------------------
abs_builtin = _unary("abs", abs)
floor = _unary("floor", math.floor)
ceil = _unary("ceil", math.ceil)
# Halves round up (toward +infinity): (round 2.5) => 3, (round -2.5) => -2
round_builtin = _unary("round", lambda x: math.floor(x + 0.5))


# -------------------------------
# Transcendental
# -------------------------------
sqrt = _unary("sqrt", math.sqrt)
sin = _unary("sin", math.sin)
cos = _unary("cos", math.cos)
tan = _unary("tan", math.tan)
log = _unary("log", math.log)
exp = _unary("exp", math.exp)


def pow_builtin(args: list[Any], *_) -> float:
    # math.pow keeps results bounded floats instead of huge ints or complex numbers
    require_args("pow", args, 2, 2)
    base, exponent = number_arg("pow", args[0]), number_arg("pow", args[1])
    try:
        return math.pow(base, exponent)
    except (ValueError, OverflowError) as ex:
        raise SevalArithmeticError(f"pow: {ex}") from ex


# -------------------------------
# Bounds
# -------------------------------
def min_builtin(args: list[Any], *_) -> Any:
    require_args("min", args, 1)
    return min(number_arg("min", a) for a in args)


def max_builtin(args: list[Any], *_) -> Any:
    require_args("max", args, 1)
    return max(number_arg("max", a) for a in args)


def clamp(args: list[Any], *_) -> Any:
    """(clamp x lo hi)"""
    require_args("clamp", args, 3, 3)
    x, lo, hi = (number_arg("clamp", a) for a in args)
    return max(lo, min(hi, x))


def random_builtin(args: list[Any], *_) -> float:
    return random.random()


def register(table: dict):
    table.update({
        'abs': abs_builtin,
        'min': min_builtin,
        'max': max_builtin,
        'floor': floor,
        'ceil': ceil,
        'round': round_builtin,
        'sqrt': sqrt,
        'pow': pow_builtin,
        'clamp': clamp,
        'sin': sin,
        'cos': cos,
        'tan': tan,
        'log': log,
        'exp': exp,
        'random': random_builtin,
    })
