"""API test fixtures: FastAPI test client with the store dependency overridden.

Invariants:
    - get_number_store overridden with a MockNumberStore: no database touched
    - Overrides and app.state cleaned up after every test

Design Decisions:
    - ASGITransport skips the lifespan, so app.state.db_manager is only present
      when a test installs one
"""

import pytest
from httpx import ASGITransport, AsyncClient

from numcheck.api.dependencies import get_number_store
from numcheck.main import app
from tests.services.mock_store import MockNumberStore


@pytest.fixture
def mock_store():
    return MockNumberStore()


@pytest.fixture
async def client(mock_store):
    app.dependency_overrides[get_number_store] = lambda: mock_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def bare_client():
    """Client with no overrides, for routes that use app.state directly."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def installed_db_manager():
    """Install a db_manager on app.state for the duration of a test."""
    installed = []

    def install(manager):
        app.state.db_manager = manager
        installed.append(manager)
        return manager

    yield install
    if installed:
        del app.state.db_manager
