"""
Services module - business logic layer.
"""
from authstore.services.auth_service import AuthStore, ensure_store

__all__ = [
    "AuthStore",
    "ensure_store",
]
