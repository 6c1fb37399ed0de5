from __future__ import annotations

"""
A minimal pygls-based Language Server for seval.

Features:
- Text synchronization and a per-document index
- Diagnostics: lex and parse errors, unmatched parens
- Hover: signatures of special forms and primitives, locally bound names
- Completion: special forms, primitives, locally bound names
- Document Symbols: names bound by define/defun/let

Note: We never evaluate the buffer. The index is rebuilt from text on every change.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from seval_lsp.indexer import SIGNATURES, DocumentIndex, Problem, build_index, is_special_form

logger = logging.getLogger(__name__)

SOURCE = "seval-ls"
WORD_BREAKS = " \t()\"\n\r;"

SEVERITIES = {
    "error": DiagnosticSeverity.Error,
    "warning": DiagnosticSeverity.Warning,
}

SYMBOL_KINDS = {
    "function": SymbolKind.Function,
    "var": SymbolKind.Variable,
    "local": SymbolKind.Variable,
}


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class SevalLanguageServer(LanguageServer):
    CMD_NAME = "seval-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)
        self.documents: Dict[str, DocumentState] = {}

    def refresh(self, uri: str, text: str) -> DocumentState:
        state = DocumentState(text=text, index=build_index(text))
        self.documents[uri] = state
        logger.debug("Indexed %s: %d symbols, %d problems", uri, len(state.index.symbols), len(state.index.problems))
        return state


ls = SevalLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: SevalLanguageServer, params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    state = ls.refresh(uri, params.text_document.text or "")
    ls.publish_diagnostics(uri, diagnostics_for(state.index))


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: SevalLanguageServer, params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # The workspace has already applied the (possibly incremental) changes
    document = ls.workspace.get_text_document(uri)
    state = ls.refresh(uri, document.source)
    ls.publish_diagnostics(uri, diagnostics_for(state.index))


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: SevalLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _to_range(line: int, col: int, length: int = 1) -> Range:
    # Index positions are 1-based, LSP positions 0-based
    line, col = max(line - 1, 0), max(col - 1, 0)
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def _to_diagnostic(problem: Problem) -> Diagnostic:
    return Diagnostic(
        range=_to_range(problem.line, problem.col),
        message=problem.message,
        severity=SEVERITIES.get(problem.severity, DiagnosticSeverity.Error),
        source=SOURCE,
    )


def diagnostics_for(index: DocumentIndex) -> List[Diagnostic]:
    return [_to_diagnostic(p) for p in index.problems]


# --- Hover ---
def hover_text(state: DocumentState, word: str) -> Optional[str]:
    if word in SIGNATURES:
        return SIGNATURES[word]
    sdef = state.index.symbols.get(word)
    if sdef is not None:
        return f"{word}: {sdef.kind} (defined at {sdef.line}:{sdef.col})"
    return None


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(ls: SevalLanguageServer, params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    word = extract_word_at(state.text, params.position)
    if not word:
        return None
    contents = hover_text(state, word)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
def completion_items(state: Optional[DocumentState]) -> List[CompletionItem]:
    items: List[CompletionItem] = []
    for name, sig in SIGNATURES.items():
        kind = CompletionItemKind.Keyword if is_special_form(name) else CompletionItemKind.Function
        items.append(CompletionItem(label=name, kind=kind, detail=sig))
    if state is not None:
        for name, sdef in state.index.symbols.items():
            if name in SIGNATURES:
                continue
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))
    return items


@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(ls: SevalLanguageServer, params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    return CompletionList(is_incomplete=False, items=completion_items(state))


# --- Document Symbols ---
def document_symbols(state: DocumentState) -> List[DocumentSymbol]:
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _to_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SYMBOL_KINDS.get(sdef.kind, SymbolKind.Variable),
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(ls: SevalLanguageServer, params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return document_symbols(state)


# --- Helpers ---
def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in WORD_BREAKS:
        start -= 1
    end = min(pos.character, len(line))
    while end < len(line) and line[end] not in WORD_BREAKS:
        end += 1
    word = line[start:end]
    return word or None


def main():
    """Run the language server over stdio."""
    ls.start_io()


if __name__ == "__main__":
    main()
