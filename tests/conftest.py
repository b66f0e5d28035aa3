import pytest

from tinyscheme.builtin.env_builtin import standard_env
from tinyscheme.interpreter import Interpreter


@pytest.fixture
def env():
    """A fresh global environment holding every primitive."""
    return standard_env()


@pytest.fixture
def interp():
    return Interpreter()
