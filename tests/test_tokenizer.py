import pytest
from hypothesis import given, strategies as st

from seval.errors import LexError
from seval.reader.tokenizer import Token, TokenKind, tokenize


def _kinds_values(source):
    return [(t.kind, t.value) for t in tokenize(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", [
            (TokenKind.LEFT_PAREN, "("),
            (TokenKind.SYMBOL, "+"),
            (TokenKind.NUMBER, 1),
            (TokenKind.NUMBER, 2),
            (TokenKind.RIGHT_PAREN, ")"),
            (TokenKind.END_OF_INPUT, ""),
        ]),
        ("true #t false #f", [
            (TokenKind.BOOLEAN, True),
            (TokenKind.BOOLEAN, True),
            (TokenKind.BOOLEAN, False),
            (TokenKind.BOOLEAN, False),
            (TokenKind.END_OF_INPUT, ""),
        ]),
        ("nil null", [
            (TokenKind.SYMBOL, "nil"),
            (TokenKind.SYMBOL, "null"),
            (TokenKind.END_OF_INPUT, ""),
        ]),
        ("3.5 -2 .5 1e3 0x1F", [
            (TokenKind.NUMBER, 3.5),
            (TokenKind.NUMBER, -2),
            (TokenKind.NUMBER, 0.5),
            (TokenKind.NUMBER, 1000.0),
            (TokenKind.NUMBER, 31),
            (TokenKind.END_OF_INPUT, ""),
        ]),
        ("NaN Infinity 1e999", [
            (TokenKind.SYMBOL, "NaN"),
            (TokenKind.SYMBOL, "Infinity"),
            (TokenKind.SYMBOL, "1e999"),
            (TokenKind.END_OF_INPUT, ""),
        ]),
        ('"a\\nb\\t\\"q\\" \\\\ \\z"', [
            (TokenKind.STRING, 'a\nb\t"q" \\ z'),
            (TokenKind.END_OF_INPUT, ""),
        ]),
        ("; only a comment\n  x ; trailing", [
            (TokenKind.SYMBOL, "x"),
            (TokenKind.END_OF_INPUT, ""),
        ]),
    ]
)
def test_tokenize_basic(source, expected):
    assert _kinds_values(source) == expected


@pytest.mark.parametrize("source", ["", "   ", "\n\n", "; comment"])
def test_empty_input_yields_single_end_token(source):
    tokens = tokenize(source)
    assert len(tokens) == 1
    assert tokens[0].kind is TokenKind.END_OF_INPUT


def test_positions_are_one_based():
    tokens = tokenize("(a\n  bc)")
    assert tokens[0] == Token(TokenKind.LEFT_PAREN, "(", 1, 1)
    assert tokens[1] == Token(TokenKind.SYMBOL, "a", 1, 2)
    assert tokens[2] == Token(TokenKind.SYMBOL, "bc", 2, 3)
    assert tokens[3] == Token(TokenKind.RIGHT_PAREN, ")", 2, 5)
    assert tokens[4] == Token(TokenKind.END_OF_INPUT, "", 2, 6)


def test_unterminated_string_reports_start():
    with pytest.raises(LexError) as exc:
        tokenize('(a\n  "open')
    assert (exc.value.line, exc.value.column) == (2, 3)


@pytest.mark.parametrize(
    "source,line,column",
    [
        ("(a [b])", 1, 4),
        ("x\n]", 2, 1),
    ]
)
def test_unexpected_character(source, line, column):
    with pytest.raises(LexError) as exc:
        tokenize(source)
    assert (exc.value.line, exc.value.column) == (line, column)


def test_lex_error_message_carries_position():
    with pytest.raises(LexError, match="line 1, column 4"):
        tokenize("(a [b])")


# -------------------------------
# Hypothesis tests
# -------------------------------
atom_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu", "Nd"), whitelist_characters="-_+*/<>=!?"),
    min_size=1, max_size=10
)


@given(st.lists(atom_strat, max_size=8))
def test_atoms_never_crash_and_end_once(atoms):
    source = "(" + " ".join(atoms) + ")"
    tokens = tokenize(source)
    assert tokens[-1].kind is TokenKind.END_OF_INPUT
    assert sum(1 for t in tokens if t.kind is TokenKind.END_OF_INPUT) == 1
    assert len(tokens) == len(atoms) + 3
