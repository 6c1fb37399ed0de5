import pytest
from hypothesis import given, strategies as st

from seval import parse, to_source
from seval.errors import (
    EmptyAtomError,
    ParseError,
    TrailingInputError,
    UnclosedListError,
    UnclosedStringError,
    UnexpectedEndError,
)
from seval.types.symbol import Symbol


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", None),
        ("null", None),
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("3.14", 3.14),
        (".5", 0.5),
        ("2e3", 2000.0),
        ("0x10", 16),
        ("0o17", 15),
        ("0b101", 5),
        ("true", True),
        ("#t", True),
        ("false", False),
        ("#f", False),
        ("abc", Symbol("abc")),
        ("NaN", Symbol("NaN")),
        ("Infinity", Symbol("Infinity")),
        ("1e999", Symbol("1e999")),
        ('"hello"', "hello"),
        ('"a\\nb"', "a\nb"),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
        ("  ; leading comment\n (x) ; trailing\n", [Symbol("x")]),
    ]
)
def test_parser(source, expected):
    assert parse(source) == expected


def test_integer_and_float_literals_keep_their_type():
    assert type(parse("42")) is int
    assert type(parse("42.0")) is float


def test_booleans_are_not_numbers():
    assert parse("true") is True
    assert parse("(#f 0)") == [False, 0]
    assert parse("(#f 0)")[0] is False


def test_symbols_are_interned():
    a, b = parse("(x x)")
    assert a is b is Symbol("x")


@pytest.mark.parametrize(
    "source,error,line,column",
    [
        ("(+ 1 2", UnclosedListError, 1, 1),
        ("(a\n  (b c)", UnclosedListError, 1, 1),
        ('(a "open', UnclosedStringError, 1, 4),
        ("(a) b", TrailingInputError, 1, 5),
        ("", UnexpectedEndError, 1, 1),
        ("   ; nothing\n", UnexpectedEndError, 2, 1),
        (")", EmptyAtomError, 1, 1),
        ("(a [b])", EmptyAtomError, 1, 4),
    ]
)
def test_parse_errors(source, error, line, column):
    with pytest.raises(error) as exc:
        parse(source)
    assert isinstance(exc.value, ParseError)
    assert (exc.value.line, exc.value.column) == (line, column)


def test_unclosed_list_is_a_parse_error():
    with pytest.raises(ParseError):
        parse("(+ 1 2")


DEEP = 3000


def test_deep_nesting_parses():
    expr = parse("(" * DEEP + ")" * DEEP)
    # Walk down iteratively; == on a list this deep would itself recurse
    for _ in range(DEEP - 1):
        assert isinstance(expr, list) and len(expr) == 1
        expr = expr[0]
    assert expr == []


def test_deep_unclosed_nesting_reports_innermost_list():
    with pytest.raises(UnclosedListError) as exc:
        parse("(" * DEEP)
    assert (exc.value.line, exc.value.column) == (1, DEEP)


# -------------------------------
# Rendering
# -------------------------------
@pytest.mark.parametrize(
    "expr, expected",
    [
        ([Symbol("+"), 1, 2.5], "(+ 1 2.5)"),
        ([Symbol("if"), True, None, False], "(if true null false)"),
        ("say \"hi\"\n", '"say \\"hi\\"\\n"'),
        ([], "()"),
    ]
)
def test_to_source(expr, expected):
    assert to_source(expr) == expected


def test_to_source_string_parses_back():
    text = 'tab\there "quoted" back\\slash'
    assert parse(to_source(text)) == text


# -------------------------------
# Strategies
# -------------------------------
RESERVED = {"true", "false", "nil", "null"}

symbol_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu"), whitelist_characters="-_?!*<>="),
    min_size=1, max_size=10
).filter(lambda s: s[0].isalpha() and s not in RESERVED).map(Symbol)

number_strat = st.one_of(
    st.integers(min_value=-10**12, max_value=10**12),
    st.floats(allow_infinity=False, allow_nan=False),
)

atom_strat = st.one_of(symbol_strat, number_strat, st.booleans())

expr_strat = st.recursive(atom_strat, lambda children: st.lists(children, max_size=5), max_leaves=25)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(expr_strat)
def test_round_trip(expr):
    parsed = parse(to_source(expr))
    assert parsed == expr
    assert_same_types(parsed, expr)


def assert_same_types(actual, expected):
    # == alone would accept True for 1 and 1.0 for 1
    assert type(actual) is type(expected)
    if isinstance(expected, list):
        for a, e in zip(actual, expected):
            assert_same_types(a, e)


@given(st.lists(symbol_strat, max_size=6))
def test_parse_flat_list(symbols):
    source = "(" + " ".join(s.id for s in symbols) + ")"
    assert parse(source) == symbols
