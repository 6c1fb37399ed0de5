import pytest

from seval import DEFAULT_PRIMITIVES, create_evaluator
from seval.errors import SevalConfigError, UnknownOperatorError
from seval.evaluation.registry import PrimitiveRegistry


def shout(args, env, evaluate):
    return str(args[0]).upper() + "!"


def test_defaults_present():
    registry = PrimitiveRegistry(DEFAULT_PRIMITIVES)
    for name in ("+", "list", "get", "str-upper", "print", "null?"):
        assert name in registry
    assert len(registry) == len(DEFAULT_PRIMITIVES)


def test_override_wins():
    registry = PrimitiveRegistry(DEFAULT_PRIMITIVES, {"+": shout})
    assert registry["+"] is shout


def test_custom_primitive_callable_from_text():
    evaluator = create_evaluator({"shout": shout})
    assert evaluator.evaluate_text('(shout "hi")') == "HI!"


def test_custom_primitive_overrides_default():
    evaluator = create_evaluator({"+": lambda args, env, evaluate: "custom"})
    assert evaluator.evaluate_text("(+ 1 2)") == "custom"


def test_primitive_receives_caller_env_and_callback():
    captured = {}

    def twice(args, env, evaluate):
        captured["env"] = env
        return evaluate(args[0], env) * 2

    evaluator = create_evaluator({"twice": twice})
    env = {"n": 4}
    # args are already evaluated; the callback re-evaluates a value as a literal
    assert evaluator.evaluate_text("(twice n)", env) == 8
    assert captured["env"] is env


def test_registry_is_read_only():
    registry = PrimitiveRegistry(DEFAULT_PRIMITIVES)
    with pytest.raises(TypeError):
        registry["new"] = shout  # type: ignore[index]


def test_evaluators_do_not_share_custom_primitives():
    create_evaluator({"shout": shout})
    with pytest.raises(UnknownOperatorError):
        create_evaluator().evaluate_text('(shout "hi")')


def test_caller_mapping_changes_after_construction_are_invisible():
    extra = {"shout": shout}
    evaluator = create_evaluator(extra)
    extra["later"] = shout
    assert "later" not in evaluator.primitives


def test_non_callable_rejected():
    with pytest.raises(SevalConfigError):
        create_evaluator({"bad": 42})


def test_non_string_name_rejected():
    with pytest.raises(SevalConfigError):
        PrimitiveRegistry(DEFAULT_PRIMITIVES, {1: shout})


def test_default_table_is_immutable():
    with pytest.raises(TypeError):
        DEFAULT_PRIMITIVES["x"] = shout  # type: ignore[index]
