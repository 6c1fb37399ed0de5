from __future__ import annotations

"""
Static indexer for seval documents.

A document may hold several top-level expressions. We tokenize the text to
find bound names and paren balance, and run the parser over each top-level
expression to find the first syntax problem. Nothing is evaluated.

Indexed bindings:
- (define name ...)            -> "var"
- (define (name params) ...)   -> "function"
- defun is a synonym of define
- (let ((name value) ...) ...) -> "local"

Positions in the index are 1-based, as reported by the tokenizer and parser.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from seval.errors import LexError, ParseError
from seval.evaluation.special_forms import SPECIAL_FORM_NAMES
from seval.reader.parser import Parser
from seval.reader.tokenizer import Token, TokenKind, tokenize

DEFINE_HEADS = ("define", "defun")
LET_HEADS = ("let",)


@dataclass
class Problem:
    message: str
    line: int
    col: int
    severity: str = "error"  # "error" | "warning"


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function" | "local"
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    problems: List[Problem] = field(default_factory=list)
    paren_balance: int = 0
    form_count: int = 0


def _symbol_at(tokens: List[Token], i: int) -> Optional[Token]:
    if i < len(tokens) and tokens[i].kind is TokenKind.SYMBOL:
        return tokens[i]
    return None


def _add(idx: DocumentIndex, tok: Token, kind: str):
    # First binding of a name wins
    name = str(tok.value)
    if name not in idx.symbols:
        idx.symbols[name] = SymbolDef(name=name, kind=kind, line=tok.line, col=tok.column)


def _index_define(idx: DocumentIndex, tokens: List[Token], i: int):
    # i points just past the head symbol
    tok = _symbol_at(tokens, i)
    if tok is not None:
        _add(idx, tok, "var")
    elif i < len(tokens) and tokens[i].kind is TokenKind.LEFT_PAREN:
        tok = _symbol_at(tokens, i + 1)
        if tok is not None:
            _add(idx, tok, "function")


def _index_let(idx: DocumentIndex, tokens: List[Token], i: int):
    # (let ((a 1) (b 2)) ...): every '(' directly inside the binding list opens a binding
    if i >= len(tokens) or tokens[i].kind is not TokenKind.LEFT_PAREN:
        return
    depth = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.kind is TokenKind.LEFT_PAREN:
            depth += 1
            if depth == 2:
                name = _symbol_at(tokens, i + 1)
                if name is not None:
                    _add(idx, name, "local")
        elif tok.kind is TokenKind.RIGHT_PAREN:
            depth -= 1
            if depth == 0:
                return
        i += 1


def _scan_tokens(idx: DocumentIndex, tokens: List[Token]):
    for i, tok in enumerate(tokens):
        if tok.kind is TokenKind.LEFT_PAREN:
            idx.paren_balance += 1
            head = _symbol_at(tokens, i + 1)
            if head is None:
                continue
            if head.value in DEFINE_HEADS:
                _index_define(idx, tokens, i + 2)
            elif head.value in LET_HEADS:
                _index_let(idx, tokens, i + 2)
        elif tok.kind is TokenKind.RIGHT_PAREN:
            idx.paren_balance -= 1


def _check_syntax(idx: DocumentIndex, text: str):
    # Parse top-level expressions one after another; stop at the first error
    parser = Parser(text)
    try:
        while True:
            parser.skip_whitespace()
            if parser.at_end():
                break
            parser.parse_expr()
            idx.form_count += 1
    except ParseError as ex:
        idx.problems.append(Problem(message=ex.message, line=ex.line or 1, col=ex.column or 1))


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    try:
        tokens = tokenize(text)
    except LexError as ex:
        # The parser would report the same spot less precisely
        idx.problems.append(Problem(message=ex.message, line=ex.line, col=ex.column))
        return idx

    _scan_tokens(idx, tokens)
    _check_syntax(idx, text)
    if idx.paren_balance != 0 and not idx.problems:
        idx.problems.append(Problem(message="Unmatched parentheses detected", line=1, col=1, severity="warning"))
    return idx


# Usage strings for hover and completion
SIGNATURES: Dict[str, str] = {
    # Special forms
    "if": "(if test then [else])",
    "let": "(let ((name value) ...) body...)",
    "cond": "(cond (test expr) ... (else expr))",
    "begin": "(begin expr...)",
    "progn": "(progn expr...)",
    "do": "(do expr...)",
    "quote": "(quote expr)",
    "lambda": "(lambda (params...) body...)",
    "fn": "(fn (params...) body...)",
    "define": "(define name value) | (define (name params...) body...)",
    "defun": "(defun name value) | (defun (name params...) body...)",
    "apply": "(apply fn args)",
    "filter": "(filter fn-or-expr list)",
    "map": "(map fn-or-expr list)",
    "find": "(find list fn-or-expr)",
    "find-index": "(find-index list fn-or-expr)",
    "sort-by": "(sort-by list fn-or-expr)",
    "count": "(count list [fn-or-expr])",
    "reduce": "(reduce list init (acc item) body) | (reduce list init fn)",
    "fold": "(fold list init (acc item) body) | (fold list init fn)",
    # Arithmetic
    "+": "(+ nums...) | (+ strs...)",
    "-": "(- x [y...])",
    "*": "(* nums...)",
    "/": "(/ x [y...])",
    "%": "(% n d)",
    # Comparison
    "=": "(= a b)",
    "!=": "(!= a b)",
    "<": "(< a b)",
    ">": "(> a b)",
    "<=": "(<= a b)",
    ">=": "(>= a b)",
    # Logic
    "and": "(and xs...)",
    "or": "(or xs...)",
    "not": "(not x)",
    # Strings
    "concat": "(concat xs...)",
    "str": "(str x)",
    "strlen": "(strlen s)",
    "substr": "(substr s start [end])",
    "str-starts-with": "(str-starts-with s prefix)",
    "str-ends-with": "(str-ends-with s suffix)",
    "str-contains": "(str-contains s part)",
    "str-replace": "(str-replace s old new)",
    "str-split": "(str-split s sep)",
    "str-join": "(str-join list sep)",
    "str-trim": "(str-trim s)",
    "str-upper": "(str-upper s)",
    "str-lower": "(str-lower s)",
    "parse-num": "(parse-num s)",
    "parse-int": "(parse-int s [radix])",
    # Lists
    "list": "(list xs...)",
    "length": "(length list-or-str)",
    "first": "(first list)",
    "rest": "(rest list)",
    "last": "(last list)",
    "nth": "(nth list i)",
    "append": "(append list x)",
    "prepend": "(prepend list x)",
    "concat-lists": "(concat-lists lists...)",
    "slice": "(slice list [start] [end])",
    "reverse": "(reverse list)",
    "range": "(range [start] end [step])",
    "empty?": "(empty? list-or-str)",
    "contains": "(contains list-or-str x)",
    "index-of": "(index-of list-or-str x)",
    # Objects
    "obj": "(obj k v ...)",
    "get": "(get target keys...)",
    "set": "(set obj k v)",
    "keys": "(keys obj)",
    "values": "(values obj)",
    "has-key": "(has-key obj k)",
    "update-at": "(update-at list i x)",
    "merge": "(merge objs...)",
    # Math
    "abs": "(abs x)",
    "min": "(min xs...)",
    "max": "(max xs...)",
    "floor": "(floor x)",
    "ceil": "(ceil x)",
    "round": "(round x)",
    "sqrt": "(sqrt x)",
    "pow": "(pow base exp)",
    "clamp": "(clamp x lo hi)",
    "sin": "(sin x)",
    "cos": "(cos x)",
    "tan": "(tan x)",
    "log": "(log x)",
    "exp": "(exp x)",
    "random": "(random)",
    # Type predicates
    "null?": "(null? x)",
    "number?": "(number? x)",
    "string?": "(string? x)",
    "bool?": "(bool? x)",
    "list?": "(list? x)",
    "object?": "(object? x)",
    # Utility
    "now": "(now)",
    "add-days": "(add-days ms days)",
    "add-hours": "(add-hours ms hours)",
    "days-since": "(days-since ms)",
    "print": "(print xs...)",
}


def is_special_form(name: str) -> bool:
    return any(sym.id == name for sym in SPECIAL_FORM_NAMES)
