"""Atom classification shared by the tokenizer and the parser."""

from __future__ import annotations

import math
import re
from typing import Optional, Union

# Characters that end an atom
DELIMITERS = frozenset(" \t\n\r\f\v()\";[]")

TRUE_LITERALS = frozenset(("true", "#t"))
FALSE_LITERALS = frozenset(("false", "#f"))
NIL_LITERALS = frozenset(("null", "nil"))

INTEGER_RE = re.compile(r"[+-]?\d+")
DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
RADIX_RE = re.compile(r"0(?:(?P<hex>[xX][0-9a-fA-F]+)|(?P<oct>[oO][0-7]+)|(?P<bin>[bB][01]+))")


def is_delimiter(char: str) -> bool:
    return char in DELIMITERS or char.isspace()


def read_boolean(token: str) -> Optional[bool]:
    if token in TRUE_LITERALS:
        return True
    if token in FALSE_LITERALS:
        return False
    return None


def read_number(token: str) -> Optional[Union[int, float]]:
    """Return the finite number spelled by ``token``, or None.

    Integer spellings give an ``int``; anything with a fraction or exponent
    gives a ``float``. ``NaN``, ``Infinity`` and overflowing literals are not
    numbers.
    """
    if INTEGER_RE.fullmatch(token):
        return int(token)
    if DECIMAL_RE.fullmatch(token):
        value = float(token)
        return value if math.isfinite(value) else None
    m = RADIX_RE.fullmatch(token)
    if m:
        if m.group("hex"):
            return int(m.group("hex")[1:], 16)
        if m.group("oct"):
            return int(m.group("oct")[1:], 8)
        return int(m.group("bin")[1:], 2)
    return None


def unescape(body: str) -> str:
    """Resolve ``\\n \\t \\\\ \\"``; any other escaped char stands for itself."""
    return ESCAPE_RE.sub(_escape_replacement, body)


ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"'}


def _escape_replacement(m: re.Match) -> str:
    ch = m.group(1)
    return ESCAPES.get(ch, ch)
