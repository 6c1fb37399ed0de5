from __future__ import annotations
from typing import Any

from seval.builtin.checks import number_arg, require_args
from seval.errors import SevalArithmeticError, SevalTypeError
from seval.types.values import display_string


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Any], *_) -> Any:
    # Any string argument turns + into concatenation; nil contributes nothing
    if any(isinstance(a, str) for a in args):
        return "".join("" if a is None else display_string(a) for a in args)
    if not all(isinstance(a, (int, float)) for a in args):
        raise SevalTypeError("All arguments to + must be numbers or strings")
    return sum(args)


def sub(args: list[Any], *_) -> Any:
    require_args("-", args, 1)
    values = [number_arg("-", a) for a in args]
    if len(values) == 1:
        return -values[0]
    result = values[0]
    for x in values[1:]:
        result -= x
    return result


def mul(args: list[Any], *_) -> Any:
    result = 1
    for x in args:
        result *= number_arg("*", x)
    return result


def div(args: list[Any], *_) -> Any:
    require_args("/", args, 1)
    values = [number_arg("/", a) for a in args]
    result = values[0]
    for x in values[1:]:
        if x == 0:
            raise SevalArithmeticError("Division by zero")
        result /= x
    return result


def mod(args: list[Any], *_) -> Any:
    # Remainder takes the sign of the dividend: (% -7 3) => -1
    require_args("%", args, 2, 2)
    a, b = number_arg("%", args[0]), number_arg("%", args[1])
    if b == 0:
        raise SevalArithmeticError("Modulo by zero")
    r = abs(a) % abs(b)
    return -r if a < 0 else r


# -------------------------------
# Registration
# -------------------------------
def register(table: dict):
    table.update({
        '+': add,
        '-': sub,
        '*': mul,
        '/': div,
        '%': mod,
    })
