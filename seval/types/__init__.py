"""Runtime data model: symbols, closures, scopes and value helpers."""

from seval.types.symbol import Symbol
from seval.types.closure import Closure
from seval.types.environment import new_scope
from seval.types.values import is_truthy, display_string, values_equal, type_name

__all__ = [
    "Symbol",
    "Closure",
    "new_scope",
    "is_truthy",
    "display_string",
    "values_equal",
    "type_name",
]
