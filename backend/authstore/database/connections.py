"""
MongoDB client construction.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from authstore.config import StoreConfig
from authstore.core.errors import StoreConnectionError

logger = logging.getLogger(__name__)


async def create_client(config: StoreConfig) -> AsyncIOMotorClient:
    """
    Create a MongoDB client and check that the server answers.

    A timeout of 0 leaves the driver defaults in place.

    Raises:
        StoreConnectionError: If the client cannot be created or the ping fails
    """
    options = {}
    if config.username:
        options["username"] = config.username
        options["password"] = config.password
    if config.timeout_milliseconds:
        options["serverSelectionTimeoutMS"] = config.timeout_milliseconds
        options["connectTimeoutMS"] = config.timeout_milliseconds

    try:
        client = AsyncIOMotorClient(host=config.hosts, **options)
    except PyMongoError as e:
        raise StoreConnectionError("Error creating DB-client") from e

    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StoreConnectionError(
            f"Error connecting to MongoDB at {', '.join(config.hosts)}"
        ) from e

    logger.info(f"Connected to MongoDB at {', '.join(config.hosts)}")
    return client
