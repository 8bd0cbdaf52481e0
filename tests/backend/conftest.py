"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for simulating
store failures and seeding the users collection.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from pymongo.errors import PyMongoError

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Store Failure Fixtures
# =============================================================================

@pytest.fixture
def failing_collection():
    """
    A users collection whose every call raises PyMongoError.

    Individual tests can replace single methods to let a lookup succeed
    and only the write fail:

        failing_collection.find_one = AsyncMock(return_value={...})
    """
    collection = MagicMock()
    error = PyMongoError("connection reset by peer")
    collection.insert_one = AsyncMock(side_effect=error)
    collection.find_one = AsyncMock(side_effect=error)
    collection.update_one = AsyncMock(side_effect=error)
    collection.delete_one = AsyncMock(side_effect=error)
    return collection


@pytest.fixture
def failing_user_service(failing_collection, clock):
    """UserService over a collection that always fails."""
    from app.services.user_service import UserService
    return UserService(failing_collection, clock=clock)


# =============================================================================
# Seeding Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def seeded_users(mock_users_collection, make_user_doc):
    """
    Seed the users collection with an old and a recently created user.

    Returns a dict of name -> inserted ObjectId.
    """
    docs = [
        make_user_doc("Bob", email="b@x.com", age_seconds=3600),
        make_user_doc("Carol", email="c@x.com", age_seconds=10),
    ]
    ids = {}
    for doc in docs:
        result = await mock_users_collection.insert_one(doc)
        ids[doc["name"]] = result.inserted_id
    return ids
