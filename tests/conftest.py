import random

import pytest
from fastapi.testclient import TestClient

from scorekeeper import state
from scorekeeper.main import app
from scorekeeper.models import AppConfig
from scorekeeper.services.team_store import TeamStore


@pytest.fixture()
def store():
    return TeamStore(AppConfig(), rng=random.Random(1234))


@pytest.fixture()
def client(store):
    # Lifespan is not run without a `with` block, so the store is injected here
    state.STORE = store
    yield TestClient(app)
    state.STORE = None
