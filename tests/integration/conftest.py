"""Fixtures for driving the API through FastAPI's TestClient."""

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_concepts
from app.main import app
from app.services.concepts import Concepts


@pytest.fixture
def make_client(concepts: Concepts):
    """Create test clients that share the in-memory concepts.

    Each client keeps its own session cookie, so one client is one user.
    The lifespan never runs, so no real MongoDB connection is made.
    """
    app.dependency_overrides[get_concepts] = lambda: concepts

    def _make_client() -> TestClient:
        return TestClient(app)

    yield _make_client

    app.dependency_overrides.clear()


@pytest.fixture
def signed_in(make_client) -> Callable[[str], TestClient]:
    """Sign up and log in a user, returning their client."""

    def _signed_in(username: str, password: str = "pw") -> TestClient:
        client = make_client()
        response = client.post("/api/users", json={"username": username, "password": password})
        assert response.status_code == 201, response.text
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return client

    return _signed_in
