import json

import pytest

from seval import Symbol, deserialize, evaluate, serialize


@pytest.mark.parametrize(
    "tree, expected",
    [
        (["+", 1, 2], [Symbol("+"), 1, 2]),
        ("x", Symbol("x")),
        (None, None),
        (True, True),
        ([["a"], 1.5], [[Symbol("a")], 1.5]),
        (["quote", "hello"], [Symbol("quote"), "hello"]),
        (["quote", ["a", "b"]], [Symbol("quote"), [Symbol("a"), Symbol("b")]]),
        (["list", ["quote", "s"]], [Symbol("list"), [Symbol("quote"), "s"]]),
    ]
)
def test_deserialize(tree, expected):
    assert deserialize(tree) == expected


def test_deserialized_tree_evaluates():
    tree = json.loads('["map", ["lambda", ["x"], ["*", "x", 2]], ["list", 1, 2, 3]]')
    assert evaluate(deserialize(tree)) == [2, 4, 6]


def test_quoted_strings_stay_literals():
    tree = ["concat", ["quote", "a"], ["quote", "b"]]
    assert evaluate(deserialize(tree)) == "ab"


@pytest.mark.parametrize(
    "expr, expected",
    [
        ([Symbol("+"), 1, [Symbol("x"), None]], ["+", 1, ["x", None]]),
        (Symbol("y"), "y"),
        (3, 3),
        (False, False),
    ]
)
def test_serialize(expr, expected):
    assert serialize(expr) == expected


def test_serialize_is_json_compatible():
    expr = [Symbol("if"), True, 1.5, [Symbol("f"), None]]
    assert json.loads(json.dumps(serialize(expr))) == ["if", True, 1.5, ["f", None]]


def test_string_literals_are_lossy():
    # Outside quote a JSON string always reads back as a symbol
    assert deserialize(serialize([Symbol("concat"), "text"])) == [Symbol("concat"), Symbol("text")]
