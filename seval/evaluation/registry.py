"""Primitive registry: the only way evaluated code reaches host functionality."""

from __future__ import annotations

import logging
from types import MappingProxyType
from collections.abc import Iterator, Mapping
from typing import Optional

from seval import PrimitiveFn
from seval.errors import SevalConfigError

logger = logging.getLogger(__name__)


class PrimitiveRegistry(Mapping[str, PrimitiveFn]):
    """Read-only name -> primitive table, fixed at construction.

    ``overrides`` are merged over ``defaults``; on a name collision the
    override wins. There is no way to register a primitive afterwards.
    """

    __slots__ = ("_table",)

    def __init__(
        self,
        defaults: Mapping[str, PrimitiveFn],
        overrides: Optional[Mapping[str, PrimitiveFn]] = None,
    ):
        table = dict(defaults)
        if overrides:
            replaced = sorted(name for name in overrides if name in table)
            if replaced:
                logger.debug("Overriding default primitives: %s", replaced)
            table.update(overrides)
        for name, fn in table.items():
            if not isinstance(name, str):
                raise SevalConfigError(f"Primitive names must be strings, got {name!r}")
            if not callable(fn):
                raise SevalConfigError(f"Primitive {name!r} is not callable")
        self._table: Mapping[str, PrimitiveFn] = MappingProxyType(table)

    def __getitem__(self, name: str) -> PrimitiveFn:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __repr__(self) -> str:
        return f"<PrimitiveRegistry {len(self._table)} primitives>"
