import pytest

from seval import DEFAULT_PRIMITIVES
from seval.evaluation.special_forms import SPECIAL_FORM_NAMES
from seval_lsp.indexer import SIGNATURES, build_index, is_special_form

SOURCE = """\
; helpers
(define limit 10)
(define (square x) (* x x))
(defun (cube x) (* x (square x)))
(let ((a 1) (b (list 2 3)))
  (+ a (first b)))
"""


def test_definitions_indexed():
    idx = build_index(SOURCE)
    assert idx.problems == []
    assert idx.paren_balance == 0
    assert idx.form_count == 4

    limit = idx.symbols["limit"]
    assert (limit.kind, limit.line, limit.col) == ("var", 2, 9)
    assert idx.symbols["square"].kind == "function"
    assert (idx.symbols["square"].line, idx.symbols["square"].col) == (3, 10)
    assert idx.symbols["cube"].kind == "function"
    assert idx.symbols["a"].kind == "local"
    assert idx.symbols["b"].kind == "local"
    assert "x" not in idx.symbols


def test_empty_document():
    idx = build_index("")
    assert idx.problems == []
    assert idx.symbols == {}
    assert idx.form_count == 0


def test_lex_error_reported():
    idx = build_index('(define x [1])')
    assert len(idx.problems) == 1
    problem = idx.problems[0]
    assert (problem.line, problem.col, problem.severity) == (1, 11, "error")


def test_unterminated_string_reported_at_start():
    idx = build_index('(define s\n  "abc)')
    assert [(p.line, p.col) for p in idx.problems] == [(2, 3)]


def test_unclosed_list_reported():
    idx = build_index("(define x 1)\n(+ 1 2")
    assert idx.paren_balance == 1
    assert len(idx.problems) == 1
    assert (idx.problems[0].line, idx.problems[0].col) == (2, 1)
    assert idx.form_count == 1


def test_stray_close_paren_reported():
    idx = build_index("(a))")
    assert idx.paren_balance == -1
    assert [(p.line, p.col) for p in idx.problems] == [(1, 4)]


@pytest.mark.parametrize("text", ["(define)", "(let)", "(let x)", "(define (", "(let ((", "(define 5 x)"])
def test_partial_forms_do_not_crash(text):
    build_index(text)


def test_deeply_nested_document():
    depth = 3000
    idx = build_index("(" * depth + ")" * depth + "\n(define x 1)")
    assert idx.problems == []
    assert idx.paren_balance == 0
    assert idx.form_count == 2
    assert "x" in idx.symbols


def test_deeply_nested_unclosed_document():
    idx = build_index("(" * 3000)
    assert idx.paren_balance == 3000
    assert [(p.line, p.col) for p in idx.problems] == [(1, 3000)]


def test_first_definition_wins():
    idx = build_index("(define x 1)\n(define x 2)")
    assert idx.symbols["x"].line == 1


def test_signatures_cover_language():
    names = {sym.id for sym in SPECIAL_FORM_NAMES}
    assert names <= set(SIGNATURES)
    assert set(DEFAULT_PRIMITIVES) <= set(SIGNATURES)


def test_is_special_form():
    assert is_special_form("fold")
    assert not is_special_form("list")
