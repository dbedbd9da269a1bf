#!/usr/bin/env python3
"""
Auth Store Bootstrap

Creates the users collection and its indexes, then exits.
Run on deploy; safe to run repeatedly.

Usage:
    python -m authstore.bootstrap

Environment Variables:
    AUTH_DB_HOSTS: JSON list of host:port strings
    AUTH_DB_USERNAME / AUTH_DB_PASSWORD: MongoDB credentials
    AUTH_DB_TIMEOUT_MILLISECONDS: Connection timeout (default: 5000)
    AUTH_DB_DATABASE / AUTH_DB_COLLECTION: Target (default: auth_db.users)
    AUTH_DB_LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import logging
import sys

from authstore.config import get_settings
from authstore.core.errors import AuthStoreError
from authstore.core.logging_config import configure_logging
from authstore.services.auth_service import ensure_store

logger = logging.getLogger("authstore.bootstrap")


async def run() -> None:
    """Bootstrap the store once and release the client."""
    config = get_settings()
    store = await ensure_store(config)
    store.collection.database.client.close()


def main() -> int:
    config = get_settings()
    configure_logging(config.log_level)

    try:
        asyncio.run(run())
    except AuthStoreError as e:
        logger.error(f"Bootstrap failed: {e}")
        return 1

    logger.info("Bootstrap complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
