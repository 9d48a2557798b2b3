import pytest

from owl.config import Config
from owl.evaluation.evaluator import Evaluator
from owl.reader.reader import Reader
from owl.types.environment import Environment


@pytest.fixture
def reader():
    return Reader()


@pytest.fixture
def env():
    """Fresh root environment."""
    return Environment()


@pytest.fixture
def evaluator():
    return Evaluator(Config())


@pytest.fixture
def uniform_evaluator():
    """Evaluator that evaluates the first operand of -, / and = like the rest."""
    return Evaluator(Config(uniform_arguments=True))


@pytest.fixture(autouse=True)
def _clean_owl_env(monkeypatch):
    # Keep host settings from leaking into Interpreter() defaults
    for var in ("OWL_FATAL_POLICY", "OWL_UNIFORM_ARGS", "OWL_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
