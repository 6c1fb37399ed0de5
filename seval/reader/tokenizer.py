"""
  Tokenizer: source text -> flat list of positioned tokens.

- Independent of the parser; used for structural validation and by the
  language server (syntax highlighting, symbol indexing).
- Emits Python primitives as token values:

    - ( and )        -> LEFT_PAREN / RIGHT_PAREN, value "(" / ")"
    - "..."          -> STRING, value with escapes resolved
    - true #t false #f -> BOOLEAN, value True / False
    - finite numbers -> NUMBER, value int / float
    - anything else  -> SYMBOL, value str (nil/null included)
    - end of input   -> END_OF_INPUT, value "" (always exactly one)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple, Union

from seval.errors import LexError
from seval.reader.atoms import read_boolean, read_number, unescape


class TokenKind(Enum):
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    NUMBER = "Number"
    STRING = "String"
    SYMBOL = "Symbol"
    BOOLEAN = "Boolean"
    END_OF_INPUT = "EndOfInput"


class Token(NamedTuple):
    kind: TokenKind
    value: Union[str, int, float, bool]
    line: int
    column: int


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted string
    r'|(?P<open_string>")'  # quote with no closing partner
    r'|(?P<atom>[^\s()";\[\]]+)',  # fallback: numbers, booleans, symbols
    re.DOTALL,
)


def _classify_atom(atom: str) -> tuple[TokenKind, Union[str, int, float, bool]]:
    boolean = read_boolean(atom)
    if boolean is not None:
        return TokenKind.BOOLEAN, boolean
    number = read_number(atom)
    if number is not None:
        return TokenKind.NUMBER, number
    return TokenKind.SYMBOL, atom


def tokenize(source: str) -> list[Token]:
    """Split ``source`` into tokens; the last token is always END_OF_INPUT."""
    tokens: list[Token] = []
    pos = 0
    line = 1
    column = 1
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise LexError(f"Unexpected character {source[pos]!r}", line, column)
        kind = m.lastgroup
        text = m.group(kind)

        if kind == "lparen":
            tokens.append(Token(TokenKind.LEFT_PAREN, "(", line, column))
        elif kind == "rparen":
            tokens.append(Token(TokenKind.RIGHT_PAREN, ")", line, column))
        elif kind == "string":
            tokens.append(Token(TokenKind.STRING, unescape(text[1:-1]), line, column))
        elif kind == "open_string":
            raise LexError("Unterminated string", line, column)
        elif kind == "atom":
            atom_kind, value = _classify_atom(text)
            tokens.append(Token(atom_kind, value, line, column))

        # Advance position, keeping line/column in step
        newlines = text.count("\n")
        if newlines:
            line += newlines
            column = len(text) - text.rfind("\n")
        else:
            column += len(text)
        pos = m.end()

    tokens.append(Token(TokenKind.END_OF_INPUT, "", line, column))
    return tokens
