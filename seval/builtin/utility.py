from __future__ import annotations

import logging
import math
import time
from typing import Any

from seval.builtin.checks import number_arg, require_args
from seval.types.values import display_string

logger = logging.getLogger("seval")

MS_PER_HOUR = 3_600_000
MS_PER_DAY = 86_400_000


# -------------------------------
# Time (milliseconds since the epoch)
# -------------------------------
def now(args: list[Any], *_) -> int:
    return int(time.time() * 1000)


def add_days(args: list[Any], *_) -> Any:
    require_args("add-days", args, 2, 2)
    return number_arg("add-days", args[0]) + number_arg("add-days", args[1]) * MS_PER_DAY


def add_hours(args: list[Any], *_) -> Any:
    require_args("add-hours", args, 2, 2)
    return number_arg("add-hours", args[0]) + number_arg("add-hours", args[1]) * MS_PER_HOUR


def days_since(args: list[Any], *_) -> int:
    require_args("days-since", args, 1, 1)
    elapsed = now([]) - number_arg("days-since", args[0])
    return math.floor(elapsed / MS_PER_DAY)


# -------------------------------
# Diagnostics
# -------------------------------
def print_builtin(args: list[Any], *_) -> Any:
    # Goes to the "seval" logger, never to stdout
    logger.info("[seval] %s", " ".join(display_string(a) for a in args))
    return args[0] if args else None


def register(table: dict):
    table.update({
        'now': now,
        'add-days': add_days,
        'add-hours': add_hours,
        'days-since': days_since,
        'print': print_builtin,
    })
