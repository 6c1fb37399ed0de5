"""Front ends: tokenizer, parser and printer."""

from seval.reader.tokenizer import tokenize, Token, TokenKind
from seval.reader.parser import parse, Parser
from seval.reader.printer import to_source

__all__ = ["tokenize", "Token", "TokenKind", "parse", "Parser", "to_source"]
