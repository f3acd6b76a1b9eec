import pytest

from mal.builtin.core import register
from mal.interpreter import Interpreter
from mal.types.environment import Environment


@pytest.fixture
def env():
    """A fresh top-level environment with the core primitives registered."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
