import pytest

from mclisp.evaluation.evaluator import evaluate
from mclisp.interpreter import Interpreter
from mclisp.reader.parser import parse_one
from mclisp.types.environment import Environment


@pytest.fixture
def env():
    """Return a fresh ambient environment for each test."""
    return Environment()


@pytest.fixture
def run(env):
    """Read one expression and evaluate it in the test's environment."""
    def _run(source: str):
        return evaluate(env, parse_one(source))
    return _run


@pytest.fixture
def interp():
    return Interpreter()
