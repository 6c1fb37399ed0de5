from __future__ import annotations
import sys


class Symbol:
    """An interned identifier: one instance per name.

    Symbols only exist in parsed expressions; evaluation replaces them with the
    value they denote, so no Symbol is ever a runtime value.
    """

    __slots__ = ("id",)
    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        if not isinstance(name, str):
            raise TypeError(f"Symbol name must be a str, got {type(name).__name__}")
        existing = cls._table.get(name)
        if existing is not None:
            return existing
        sym = super().__new__(cls)
        sym.id = sys.intern(name)
        cls._table[sym.id] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("Symbol", self.id))

    def __reduce__(self):
        return Symbol, (self.id,)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
