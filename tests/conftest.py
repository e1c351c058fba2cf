"""Shared fixtures: a fresh store and an app/client wired to it per test."""
import pytest
from fastapi.testclient import TestClient

from repo_tracker.settings import Settings
from api.main import create_app
from api.stores.memory import InMemoryRepositoryStore


@pytest.fixture
def store():
    return InMemoryRepositoryStore()


@pytest.fixture
def client(store):
    app = create_app(Settings(), store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def repo_a():
    return {"title": "Repo A", "url": "http://a.com", "techs": ["Node"]}
