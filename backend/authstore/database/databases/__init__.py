"""
Database definitions and collection constants.
"""
from authstore.database.databases import auth_db

__all__ = ["auth_db"]
