"""Pytest configuration for integration tests."""

import httpx
import pytest

from fittrack.clients import FitnessTrackerClient
from fittrack.db import init_store
from fittrack.web import create_app


def pytest_collection_modifyitems(items):
    """Mark every test in this directory as an integration test."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def app(tmp_path):
    """Application over a freshly initialized data directory."""
    app = create_app(tmp_path / "data")
    init_store(app.state.store)
    return app


@pytest.fixture
def client(app):
    """API client talking to the app in-process."""
    return FitnessTrackerClient(
        "http://fittrack.test", transport=httpx.ASGITransport(app=app)
    )
