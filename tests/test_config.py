import pytest

from seval import EvaluatorOptions, create_evaluator, evaluate_text, get_default_evaluator
from seval.config import DEFAULT_MAX_DEPTH, get_max_depth, validate_max_depth
from seval.errors import RecursionLimitError, SevalConfigError
from seval.evaluation.evaluator import Evaluator


def test_default_max_depth():
    assert get_max_depth() == DEFAULT_MAX_DEPTH == 100


@pytest.mark.parametrize("raw,expected", [("7", 7), (" 250 ", 250), ("", DEFAULT_MAX_DEPTH)])
def test_max_depth_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("SEVAL_MAX_DEPTH", raw)
    assert get_max_depth() == expected


@pytest.mark.parametrize("raw", ["ten", "0", "-3", "1.5"])
def test_bad_env_value(monkeypatch, raw):
    monkeypatch.setenv("SEVAL_MAX_DEPTH", raw)
    with pytest.raises(SevalConfigError):
        create_evaluator()


@pytest.mark.parametrize("value", [0, -1, True, 2.0, "10"])
def test_validate_max_depth_rejects(value):
    with pytest.raises(SevalConfigError):
        validate_max_depth(value)


def test_options_drive_evaluator():
    options = EvaluatorOptions(max_depth=12)
    assert Evaluator(options).max_depth == 12


def test_options_are_frozen():
    options = EvaluatorOptions()
    with pytest.raises(AttributeError):
        options.max_depth = 5  # type: ignore[misc]


def test_evaluator_without_options():
    assert Evaluator().max_depth == DEFAULT_MAX_DEPTH


def test_default_evaluator_is_shared():
    assert get_default_evaluator() is get_default_evaluator()
    assert get_default_evaluator().max_depth == DEFAULT_MAX_DEPTH


def test_default_evaluator_follows_env_var(monkeypatch):
    monkeypatch.setenv("SEVAL_MAX_DEPTH", "3")
    assert get_default_evaluator().max_depth == 3
    with pytest.raises(RecursionLimitError):
        evaluate_text("(if true (if true (if true (if true 1))))")


def test_bad_env_value_fails_on_use_not_import(monkeypatch):
    monkeypatch.setenv("SEVAL_MAX_DEPTH", "ten")
    with pytest.raises(SevalConfigError):
        evaluate_text("(+ 1 2)")
    monkeypatch.delenv("SEVAL_MAX_DEPTH")
    assert evaluate_text("(+ 1 2)") == 3
