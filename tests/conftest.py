import pytest
from fastapi.testclient import TestClient

from pantry.cmd.server import create_app
from pantry.lib.seed import seed_store
from pantry.lib.store import RecipeStore
from pantry.settings import Settings


@pytest.fixture
def store() -> RecipeStore:
    store = RecipeStore()
    seed_store(store)
    return store


@pytest.fixture
def client(store: RecipeStore):
    app = create_app(store=store, settings=Settings(_env_file=None))
    with TestClient(app) as client:
        yield client
