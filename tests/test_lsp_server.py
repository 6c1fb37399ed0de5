import pytest

pytest.importorskip("pygls")

from lsprotocol.types import CompletionItemKind, DiagnosticSeverity, Position, SymbolKind  # noqa: E402

from seval_lsp.indexer import build_index  # noqa: E402
from seval_lsp.server import (  # noqa: E402
    DocumentState,
    SevalLanguageServer,
    completion_items,
    diagnostics_for,
    document_symbols,
    extract_word_at,
    hover_text,
    ls,
)

TEXT = "(define (square x) (* x x))\n(square 4)\n"


@pytest.fixture
def state():
    return DocumentState(text=TEXT, index=build_index(TEXT))


def test_server_instance():
    assert isinstance(ls, SevalLanguageServer)
    assert ls.name == "seval-ls"


def test_refresh_stores_document():
    uri = "file:///a.sev"
    state = ls.refresh(uri, TEXT)
    try:
        assert ls.documents[uri] is state
        assert "square" in state.index.symbols
    finally:
        ls.documents.pop(uri, None)


def test_diagnostics_are_zero_based():
    diags = diagnostics_for(build_index("(ok)\n(+ 1 2"))
    assert len(diags) == 1
    assert diags[0].severity == DiagnosticSeverity.Error
    assert (diags[0].range.start.line, diags[0].range.start.character) == (1, 0)
    assert diags[0].source == "seval-ls"


def test_no_diagnostics_for_valid_text(state):
    assert diagnostics_for(state.index) == []


def test_hover(state):
    assert hover_text(state, "map") == "(map fn-or-expr list)"
    assert hover_text(state, "square") == "square: function (defined at 1:10)"
    assert hover_text(state, "unknown") is None


@pytest.mark.parametrize(
    "line,character,expected",
    [
        (0, 10, "square"),
        (0, 1, "define"),
        (1, 8, "4"),
        (5, 0, None),
    ]
)
def test_extract_word_at(line, character, expected):
    assert extract_word_at(TEXT, Position(line=line, character=character)) == expected


def test_completion(state):
    items = {item.label: item for item in completion_items(state)}
    assert items["if"].kind == CompletionItemKind.Keyword
    assert items["str-upper"].kind == CompletionItemKind.Function
    assert items["square"].kind == CompletionItemKind.Function


def test_completion_without_document():
    labels = {item.label for item in completion_items(None)}
    assert "reduce" in labels


def test_document_symbols(state):
    symbols = document_symbols(state)
    assert [s.name for s in symbols] == ["square"]
    assert symbols[0].kind == SymbolKind.Function
    assert (symbols[0].range.start.line, symbols[0].range.start.character) == (0, 9)
    assert symbols[0].range.end.character == 15
