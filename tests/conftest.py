"""
Global test fixtures for the UserDirectory backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- A controllable clock for time-dependent rules
- User document factories
- FastAPI test clients wired to the mock database
"""

import sys
from datetime import datetime, timezone, timedelta
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Clock Fixtures
# =============================================================================

class FakeClock:
    """Callable clock returning a fixed, manually advanced UTC time."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    """A clock frozen at 2024-10-15T12:00:00Z until advanced."""
    return FakeClock(datetime(2024, 10, 15, 12, 0, 0, tzinfo=timezone.utc))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest.fixture
def mock_users_collection(mock_async_mongo_client):
    """Provide the mock users collection."""
    return mock_async_mongo_client["user_directory"]["users"]


@pytest.fixture
def user_service(mock_users_collection, clock):
    """UserService over the mock collection and the fake clock."""
    from app.services.user_service import UserService
    return UserService(mock_users_collection, clock=clock)


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for creation."""
    return {
        "name": "Alice",
        "email": "a@x.com",
    }


@pytest.fixture
def make_user_doc(clock):
    """
    Factory for stored user documents.

    Usage:
        doc = make_user_doc("Bob", age_seconds=120)
    """
    def _make(name: str, email: str = "b@x.com", age_seconds: float = 3600) -> dict:
        return {
            "name": name,
            "email": email,
            "createdAt": clock() - timedelta(seconds=age_seconds),
        }
    return _make


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app and should be used with mocked
    database connections.
    """
    from app.main import app
    yield app
    app.dependency_overrides.clear()


def _patched_mongo(mock_client):
    """Patch every get_mongo_client import site with the given client."""
    async def _get_mongo():
        return mock_client

    return (
        patch("app.database.connections.get_mongo_client", _get_mongo),
        patch("app.routers.health.get_mongo_client", _get_mongo),
    )


@pytest.fixture
def client(app, mock_async_mongo_client, user_service) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    The user service runs against the mock database and the fake clock.
    """
    from app.routers.users import get_user_service

    app.dependency_overrides[get_user_service] = lambda: user_service
    connections_patch, health_patch = _patched_mongo(mock_async_mongo_client)
    with connections_patch, health_patch:
        with TestClient(app) as c:
            yield c


@pytest.fixture
def mock_user_service():
    """
    Create a fully mocked UserService.

    All methods are AsyncMock, allowing you to configure return values
    or assert that the store was never reached.
    """
    service = MagicMock()
    service.create_user = AsyncMock()
    service.get_user = AsyncMock()
    service.update_user = AsyncMock()
    service.delete_user = AsyncMock()
    return service


@pytest.fixture
def client_with_mock_service(app, mock_async_mongo_client, mock_user_service) -> Generator:
    """TestClient whose user service is a MagicMock."""
    from app.routers.users import get_user_service

    app.dependency_overrides[get_user_service] = lambda: mock_user_service
    connections_patch, health_patch = _patched_mongo(mock_async_mongo_client)
    with connections_patch, health_patch:
        with TestClient(app) as c:
            yield c
