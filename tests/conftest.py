import pytest

from eta.builtin.env_builtin import create_root_environment
from eta.evaluation.evaluator import evaluate
from eta.reader.parser import read


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return create_root_environment()


@pytest.fixture
def run(env):
    """Read source text and evaluate it as one module in the `env` fixture."""

    def _run(source: str):
        return evaluate(read(source, "test.eta"), env)

    return _run
