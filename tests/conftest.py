"""
Pytest fixtures for TruthLens tests. Each test gets a fresh in-memory store
and a seeded scoring agent.
"""

import random

import pytest
from fastapi.testclient import TestClient

from truthlens.core.store import MemoryResultStore
from truthlens.services.orchestrator import AnalysisOrchestrator, get_orchestrator
from truthlens.services.scoring.agent import CredibilityScoringAgent


class UpperRandom(random.Random):
    """Random source whose uniform() always returns the top of the range."""

    def uniform(self, a, b):
        return b


class LowerRandom(random.Random):
    """Random source whose uniform() always returns the bottom of the range."""

    def uniform(self, a, b):
        return a


@pytest.fixture
def upper_agent():
    return CredibilityScoringAgent(rng=UpperRandom(0))


@pytest.fixture
def lower_agent():
    return CredibilityScoringAgent(rng=LowerRandom(0))


@pytest.fixture
def store():
    return MemoryResultStore()


@pytest.fixture
def agent():
    return CredibilityScoringAgent(rng=random.Random(1234))


@pytest.fixture
def orchestrator(store, agent):
    return AnalysisOrchestrator(store=store, agent=agent)


@pytest.fixture
def client(orchestrator):
    from truthlens.api.main import app

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()
