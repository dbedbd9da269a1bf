"""
Backend-specific test fixtures.

These fixtures bootstrap an AuthStore on the in-memory MongoDB so
service tests run against a real collection with real indexes.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Auth Store Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def auth_store(store_config, mock_async_mongo_client):
    """A bootstrapped AuthStore on an empty mock collection."""
    from authstore.services.auth_service import ensure_store

    return await ensure_store(store_config, client=mock_async_mongo_client)


@pytest_asyncio.fixture
async def populated_store(auth_store, alice, bob):
    """AuthStore holding alice and bob."""
    await auth_store.create_user(alice)
    await auth_store.create_user(bob)
    return auth_store


# =============================================================================
# Driver Failure Helpers
# =============================================================================

@pytest.fixture
def failing_database():
    """
    A database mock whose every call fails with the given driver error.

    Usage:
        db = failing_database(OperationFailure("boom"))
    """
    def _make(error: Exception) -> MagicMock:
        db = MagicMock()
        db.list_collection_names = AsyncMock(side_effect=error)
        db.create_collection = AsyncMock(side_effect=error)
        return db
    return _make
