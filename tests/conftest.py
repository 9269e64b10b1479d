import random

import pytest
from fastapi.testclient import TestClient

from bank import AgeGroupBank
from fakes import FakeClock, ManualScheduler
from main import app
from store import SessionStore, get_store


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(scheduler, clock):
    return SessionStore(
        bank=AgeGroupBank("extended"),
        scheduler=scheduler,
        rng_factory=lambda: random.Random(1234),
        timeout_minutes=30,
        clock=clock,
    )


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
