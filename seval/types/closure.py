"""Closure representation and argument binding for seval."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterable

from seval import Environment, LispValue, SExpression
from seval.types.environment import new_scope

logger = logging.getLogger(__name__)


class Closure:
    """A user-defined function: parameter names, a body, and a captured scope.

    The captured scope is a snapshot taken when the closure is built; it is
    owned by the closure for its whole lifetime.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: Iterable[str], body: SExpression, env: Environment):
        self.params: tuple[str, ...] = tuple(params)
        self.body: SExpression = body
        self.env: Environment = env
        logger.debug("Closure created: params=(%s)", ", ".join(self.params))

    def bind(self, args: list[LispValue]) -> Environment:
        """Return a fresh copy of the captured scope with params bound positionally.

        Extra arguments are ignored; parameters without an argument stay unbound.
        """
        return new_scope(self.env, zip(self.params, args))

    def __str__(self) -> str:
        from seval.reader.printer import to_source

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure params=({', '.join(self.params)})>"
