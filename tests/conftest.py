"""
Pytest configuration and fixtures.
"""

import itertools
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from account_service.application.interfaces.repositories import (
    AccountRepositoryInterface,
)
from account_service.config.settings import Settings

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings():
    """Test settings configuration."""
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL=TEST_DATABASE_URL,
        LOG_LEVEL="DEBUG",
        DEBUG=True,
        CREATE_TABLES_ON_STARTUP=True,
        ENABLE_METRICS=True,
    )


@pytest.fixture
def id_factory():
    """Deterministic address id factory: addr-1, addr-2, ..."""
    counter = itertools.count(1)
    return lambda: f"addr-{next(counter)}"


@pytest.fixture
def sample_address_data():
    """Sample address payload for testing."""
    return {
        "street": "1 Main",
        "city": "X",
        "state": "Y",
        "zip": "560001",
        "country": "IN",
    }


@pytest.fixture
def mock_account_repository():
    """Mock account repository."""
    mock_repo = AsyncMock(spec=AccountRepositoryInterface)

    mock_repo.get_by_id = AsyncMock()
    mock_repo.get_by_email = AsyncMock(return_value=None)
    mock_repo.create = AsyncMock()
    mock_repo.save_address_book = AsyncMock()
    mock_repo.commit = AsyncMock()
    mock_repo.rollback = AsyncMock()

    return mock_repo


@pytest.fixture
def client(test_settings):
    """Create test FastAPI client backed by an in-memory database."""
    from account_service.api.app import create_app

    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
