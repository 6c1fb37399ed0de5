from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from seval import PrimitiveFn
from seval.errors import SevalConfigError


# Defaults
DEFAULT_MAX_DEPTH = 100
MAX_DEPTH_VAR = 'SEVAL_MAX_DEPTH'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise SevalConfigError(f"{var} must be an integer, got {raw!r}")


def get_max_depth() -> int:
    return validate_max_depth(int_from_env(MAX_DEPTH_VAR, DEFAULT_MAX_DEPTH))


def validate_max_depth(value) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise SevalConfigError(f"max_depth must be a positive integer, got {value!r}")
    return value


@dataclass(frozen=True)
class EvaluatorOptions:
    """Construction options for an Evaluator.

    primitives: extra or overriding primitive functions, merged over the defaults.
    max_depth:  recursion bound; None means the SEVAL_MAX_DEPTH env var or 100.
    """
    primitives: Optional[Mapping[str, PrimitiveFn]] = None
    max_depth: Optional[int] = None

    def resolved_max_depth(self) -> int:
        if self.max_depth is None:
            return get_max_depth()
        return validate_max_depth(self.max_depth)
