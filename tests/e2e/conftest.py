"""E2E fixtures: the real FastAPI app over the in-memory container."""

import pytest
from fastapi.testclient import TestClient

from qeta.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def make_client():
    """Factory for test clients, each with a fresh in-memory store.

    Settings are read when the first request resolves them, so environment
    overrides set before the first request apply.
    """

    def _make_client() -> TestClient:
        return TestClient(create_app(build_test_container()))

    return _make_client


@pytest.fixture
def client(make_client):
    """Create test client."""
    return make_client()
