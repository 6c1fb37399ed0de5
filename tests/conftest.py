import os

import pytest

# The recursion bound must not come from the developer's shell
os.environ.pop("SEVAL_MAX_DEPTH", None)

from seval import create_evaluator  # noqa: E402

# Tests share one evaluator per test and a fresh top-level scope.


@pytest.fixture
def evaluator():
    return create_evaluator()


@pytest.fixture
def env():
    return {}


@pytest.fixture
def run(evaluator, env):
    """Evaluate source text in the shared test scope."""
    def _run(source: str):
        return evaluator.evaluate_text(source, env)
    return _run
