"""
Global test fixtures for authstore.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Store configuration
- Test user factories
"""

import sys
from pathlib import Path
from uuid import UUID

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    # Declared in the test extra; a missing install should fail, not skip
    from mongomock_motor import AsyncMongoMockClient

    client = AsyncMongoMockClient()
    yield client
    client.close()


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def store_config():
    """Store configuration pointing at a test database."""
    from authstore.config import StoreConfig

    return StoreConfig(
        hosts=["localhost:27017"],
        username="auth",
        password="auth-password",
        timeout_milliseconds=2000,
        database="auth_db_test",
        collection="users",
    )


# =============================================================================
# User Fixtures
# =============================================================================

ALICE_UUID = UUID("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
BOB_UUID = UUID("9f2c1a6e-3b1d-4c55-8d7e-2a4f0e6b1c33")


@pytest.fixture(scope="session")
def alice_password_hash() -> str:
    """Bcrypt hash of alice's password (hashed once, bcrypt is slow)."""
    from authstore.core.security import hash_password

    return hash_password("secret")


@pytest.fixture
def alice(alice_password_hash):
    """An unsaved user as a registration flow would hand it over."""
    from authstore.models.user import User

    return User(
        uuid=ALICE_UUID,
        email="alice@example.com",
        first_name="Alice",
        last_name="Liddell",
        username="alice",
        password=alice_password_hash,
        role="user",
        version=1,
    )


@pytest.fixture
def bob(alice_password_hash):
    """A second user with a distinct username and version."""
    from authstore.models.user import User

    return User(
        uuid=BOB_UUID,
        email="bob@example.com",
        first_name="Bob",
        username="bob",
        password=alice_password_hash,
        role="admin",
        version=2,
    )
