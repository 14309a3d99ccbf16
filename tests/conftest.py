import pytest
from fastapi.testclient import TestClient

from quantum_oracle.engine import QuantumOracleEngine
from quantum_oracle.main import app
from quantum_oracle.randomness import RandomSource
from quantum_oracle.routes import get_engine


class ScriptedRandom:
    """Random source returning fixed fractions of each requested range"""

    def __init__(self, fraction: float):
        self.fraction = fraction

    def uniform(self, low, high):
        return low + (high - low) * self.fraction

    def integers(self, low, high):
        return low + int((high - low) * self.fraction)


@pytest.fixture
def engine():
    return QuantumOracleEngine(RandomSource(seed=7))


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def override_engine():
    """Swap the app engine for the duration of a test"""
    def _override(replacement):
        app.dependency_overrides[get_engine] = lambda: replacement
    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def scripted_random():
    return ScriptedRandom
