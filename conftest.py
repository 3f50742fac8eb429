import pytest
from fastapi.testclient import TestClient
from bookstore.main import app, get_store
from bookstore.storage import BookStore, seeded_store


@pytest.fixture(scope="function")
def store():
    return seeded_store()


@pytest.fixture(scope="function")
def empty_store():
    return BookStore()


@pytest.fixture(scope="function")
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
