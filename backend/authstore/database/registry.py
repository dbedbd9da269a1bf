"""
Collection and index bootstrap.
Ensures a collection exists with exactly the declared indexes.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import CollectionInvalid, PyMongoError

from authstore.core.errors import SchemaError
from authstore.database.databases.auth_db import IndexConfig

logger = logging.getLogger(__name__)


async def ensure_collection(
    db: AsyncIOMotorDatabase,
    name: str,
    indexes: list[IndexConfig],
) -> AsyncIOMotorCollection:
    """
    Create the collection and its indexes if they don't exist.

    Safe to run repeatedly. An index that already exists under the same
    name is left alone when its keys and uniqueness match; otherwise the
    existing definition wins and SchemaError is raised.

    Raises:
        SchemaError: On an index conflict or any driver failure
    """
    try:
        existing = await db.list_collection_names()
        if name not in existing:
            try:
                await db.create_collection(name)
                logger.info(f"Created collection {name}")
            except CollectionInvalid:
                # Created concurrently by another bootstrap
                logger.debug(f"Collection {name} already exists")

        collection = db[name]
        current = await collection.index_information()

        for index in indexes:
            info = current.get(index.name)
            if info is not None:
                if not index.matches(info):
                    raise SchemaError(
                        f"Index {index.name} on {name} exists with a "
                        f"different definition: {info}"
                    )
                logger.debug(f"Index {index.name} already exists")
                continue

            await collection.create_index(
                index.keys,
                name=index.name,
                unique=index.unique,
            )
            logger.info(f"Created index {index.name} on {name}")
    except PyMongoError as e:
        raise SchemaError(f"Error ensuring collection {name}") from e

    return collection
