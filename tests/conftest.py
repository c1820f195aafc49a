import pytest
from fastapi.testclient import TestClient

from inventory_backend.database import init_db
from inventory_backend.main import create_app


@pytest.fixture
def db():
    return init_db(seed=False)


@pytest.fixture
def seeded_db():
    return init_db(seed=True)


@pytest.fixture
def client(seeded_db):
    with TestClient(create_app(seeded_db)) as c:
        yield c
