"""
Database module - MongoDB client, collection bootstrap and definitions.
"""
from authstore.database.connections import create_client
from authstore.database.databases import auth_db
from authstore.database.registry import ensure_collection

__all__ = [
    "create_client",
    "ensure_collection",
    "auth_db",
]
