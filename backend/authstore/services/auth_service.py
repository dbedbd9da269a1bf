"""
Auth store for user lookup and login.
"""
import logging
from typing import Optional
from uuid import UUID

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from authstore.config import StoreConfig
from authstore.core.errors import (
    DuplicateUserError,
    InvalidCredentialsError,
    SchemaError,
    UserNotFoundError,
)
from authstore.core.security import verify_password
from authstore.database.connections import create_client
from authstore.database.databases import auth_db
from authstore.database.registry import ensure_collection
from authstore.models.user import NIL_UUID, User

logger = logging.getLogger(__name__)


async def ensure_store(
    config: StoreConfig,
    client: Optional[AsyncIOMotorClient] = None,
) -> "AuthStore":
    """
    Bootstrap the users collection and return a ready AuthStore.

    Creates the collection and its username/version indexes if they
    don't exist. Safe to call on every startup.

    Args:
        config: Connection and target collection settings
        client: Existing client to use instead of creating one from config

    Returns:
        AuthStore bound to the users collection

    Raises:
        StoreConnectionError: If the client cannot be created
        SchemaError: If the collection or indexes cannot be ensured
    """
    owns_client = client is None
    if owns_client:
        client = await create_client(config)

    db = client[config.database]
    try:
        collection = await ensure_collection(db, config.collection, auth_db.USER_INDEXES)
    except SchemaError:
        if owns_client:
            client.close()
        raise
    logger.info(f"Auth store ready on {config.database}.{config.collection}")
    return AuthStore(collection)


class AuthStore:
    """
    Data access for auth actions such as login and lookup.

    Only obtain instances through ensure_store(); the collection is
    assumed to be bootstrapped.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """Initialize with the bootstrapped users collection."""
        self._collection = collection
        self.schema = User

    @property
    def collection(self) -> AsyncIOMotorCollection:
        """The MongoDB collection used for user-auth operations."""
        return self._collection

    async def _find(self, example: User, limit: int) -> list[User]:
        """Query by example, newest version first."""
        cursor = (
            self._collection.find(example.to_document())
            .sort("version", DESCENDING)
            .limit(limit)
        )
        documents = await cursor.to_list(length=limit)
        return [self.schema.from_document(doc) for doc in documents]

    async def user_by_uuid(self, uid: UUID) -> User:
        """
        Get the user with the given UUID.

        uuid is not index-enforced as unique; if several users share it,
        the one with the highest version is returned.

        Raises:
            UserNotFoundError: If no user has this UUID
        """
        if uid == NIL_UUID:
            raise UserNotFoundError("UserByUUID: User not found")

        users = await self._find(User(uuid=uid), limit=1)
        if not users:
            raise UserNotFoundError("UserByUUID: User not found")
        return users[0]

    async def login(self, credentials: User) -> User:
        """
        Authenticate a username and plaintext password.

        Args:
            credentials: User carrying username and the candidate password

        Returns:
            The stored user, including its password hash

        Raises:
            InvalidCredentialsError: If the username is unknown or the
                password does not match (same message for both)
        """
        if not credentials.username:
            raise InvalidCredentialsError()

        users = await self._find(User(username=credentials.username), limit=1)
        if not users:
            raise InvalidCredentialsError()

        stored = users[0]
        if not verify_password(credentials.password, stored.password):
            raise InvalidCredentialsError()

        return stored

    async def create_user(self, user: User) -> User:
        """
        Insert a new user.

        The password must already be hashed; uuid and version are taken
        as given.

        Returns:
            Copy of the user with its assigned id

        Raises:
            DuplicateUserError: If the username or version is already taken
        """
        try:
            result = await self._collection.insert_one(user.to_document())
        except DuplicateKeyError as e:
            key_value = (e.details or {}).get("keyValue")
            if key_value:
                conflict = ", ".join(f"{field}={value!r}" for field, value in key_value.items())
            else:
                conflict = f"username={user.username!r} or version={user.version!r}"
            raise DuplicateUserError(f"User already exists with {conflict}") from e

        return user.model_copy(update={"id": result.inserted_id})

    async def latest_user(self) -> User:
        """
        Get the most recently created user (highest version).

        Raises:
            UserNotFoundError: If the collection is empty
        """
        users = await self._find(User(), limit=1)
        if not users:
            raise UserNotFoundError("LatestUser: No users stored")
        return users[0]
