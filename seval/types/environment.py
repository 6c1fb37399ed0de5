"""Scoping for seval.

An environment is a plain ``dict`` from variable name to value. Entering a scope
(``let``, a closure call, an inline predicate) never links to the enclosing dict;
it takes a shallow copy instead. Bindings added to an environment after a copy
was taken are therefore invisible to the copy, and a closure never observes
definitions made after it captured its scope.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Tuple

from seval import Environment, LispValue


def new_scope(
    env: Mapping[str, LispValue],
    bindings: Optional[Iterable[Tuple[str, LispValue]]] = None,
) -> Environment:
    """Return an independent copy of ``env`` extended with ``bindings``."""
    scope: Environment = dict(env)
    if bindings is not None:
        for name, value in bindings:
            scope[name] = value
    return scope


def item_scope(env: Mapping[str, LispValue], item: LispValue) -> Environment:
    """Scope for an inline predicate: the item is bound as both ``@`` and ``it``."""
    return new_scope(env, (("@", item), ("it", item)))
