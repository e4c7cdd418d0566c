import pytest

from minischeme.interpreter import Interpreter
from minischeme.types.environment import Environment


@pytest.fixture
def interp():
    """Fresh interpreter with an empty global environment."""
    return Interpreter()


@pytest.fixture
def env():
    """Fresh global environment for evaluator-level tests."""
    return Environment()


@pytest.fixture
def run(interp):
    """Shortcut: evaluate one expression and return its printed form."""
    return interp.run
