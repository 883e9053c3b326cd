"""Service test fixtures: a fresh MockNumberStore per test."""

import pytest

from tests.services.mock_store import MockNumberStore


@pytest.fixture
def store():
    return MockNumberStore()
