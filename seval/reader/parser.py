"""
  Stack-based parser: source text -> one expression.

The parser scans characters itself and does not consume the tokenizer's
output. It emits plain Python objects:

    - ( ... )            -> list
    - "..."              -> str (a literal, never looked up)
    - true #t false #f   -> bool
    - null nil           -> None
    - finite numbers     -> int / float
    - anything else      -> Symbol (a variable or operator reference)

Errors carry 1-based line and column numbers.
"""

from __future__ import annotations

from seval import SExpression
from seval.errors import (
    EmptyAtomError,
    TrailingInputError,
    UnclosedListError,
    UnclosedStringError,
    UnexpectedEndError,
)
from seval.reader.atoms import NIL_LITERALS, is_delimiter, read_boolean, read_number, ESCAPES
from seval.types.symbol import Symbol


class Parser:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def position(self, offset: int | None = None) -> tuple[int, int]:
        """(line, column) of ``offset``, both 1-based."""
        if offset is None:
            offset = self.pos
        line = self.source.count("\n", 0, offset) + 1
        last_nl = self.source.rfind("\n", 0, offset)
        return line, offset - last_nl

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def skip_whitespace(self) -> None:
        source = self.source
        n = len(source)
        while self.pos < n:
            ch = source[self.pos]
            if ch.isspace():
                self.pos += 1
            elif ch == ";":
                end = source.find("\n", self.pos)
                self.pos = n if end == -1 else end
            else:
                break

    def parse(self) -> SExpression:
        expr = self.parse_expr()
        self.skip_whitespace()
        if not self.at_end():
            rest = self.source[self.pos:]
            raise TrailingInputError(
                f"Unexpected characters after expression: {rest[:20]!r}", *self.position()
            )
        return expr

    def parse_expr(self) -> SExpression:
        # Open lists live on an explicit stack of (start offset, items), so
        # nesting depth never touches the Python call stack
        stack: list[tuple[int, list[SExpression]]] = []
        while True:
            self.skip_whitespace()
            if self.at_end():
                if stack:
                    start, _ = stack[-1]
                    raise UnclosedListError("Expected closing parenthesis", *self.position(start))
                raise UnexpectedEndError("Unexpected end of input", *self.position())

            ch = self.source[self.pos]
            if ch == "(":
                stack.append((self.pos, []))
                self.pos += 1  # consume '('
                continue
            if ch == ")" and stack:
                self.pos += 1
                _, expr = stack.pop()
            elif ch == '"':
                expr = self.parse_string()
            else:
                expr = self.parse_atom()

            if not stack:
                return expr
            stack[-1][1].append(expr)

    def parse_string(self) -> str:
        start = self.pos
        self.pos += 1  # consume opening quote
        source = self.source
        n = len(source)
        chunks: list[str] = []
        while self.pos < n and source[self.pos] != '"':
            ch = source[self.pos]
            if ch == "\\" and self.pos + 1 < n:
                escaped = source[self.pos + 1]
                chunks.append(ESCAPES.get(escaped, escaped))
                self.pos += 2
            else:
                chunks.append(ch)
                self.pos += 1
        if self.at_end():
            raise UnclosedStringError("Expected closing quote", *self.position(start))
        self.pos += 1  # consume closing quote
        return "".join(chunks)

    def parse_atom(self) -> SExpression:
        start = self.pos
        source = self.source
        n = len(source)
        while self.pos < n and not is_delimiter(source[self.pos]):
            self.pos += 1
        token = source[start:self.pos]
        if not token:
            raise EmptyAtomError(f"Unexpected character {source[start]!r}", *self.position(start))

        boolean = read_boolean(token)
        if boolean is not None:
            return boolean
        if token in NIL_LITERALS:
            return None
        number = read_number(token)
        if number is not None:
            return number
        return Symbol(token)


def parse(source: str) -> SExpression:
    """Parse exactly one expression from ``source``."""
    return Parser(source).parse()
