"""Shared fixtures for end-to-end tests.

Each test gets a fresh app backed by in-memory persistence.
"""

import pytest
from fastapi.testclient import TestClient

from inkwell.config import Settings
from inkwell.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client."""
    app = create_app(
        container=build_test_container(), settings=Settings(environment="test")
    )
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
