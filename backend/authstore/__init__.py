"""
authstore - MongoDB-backed user storage and credential checks.
"""
from authstore.config import StoreConfig, get_settings
from authstore.core.errors import (
    AuthStoreError,
    DecodeError,
    DuplicateUserError,
    InvalidCredentialsError,
    ParseError,
    SchemaError,
    StoreConnectionError,
    UserNotFoundError,
)
from authstore.core.security import hash_password, verify_password
from authstore.models.user import NIL_UUID, User
from authstore.schemas.user import UserResponse
from authstore.services.auth_service import AuthStore, ensure_store

__all__ = [
    "AuthStore",
    "AuthStoreError",
    "DecodeError",
    "DuplicateUserError",
    "InvalidCredentialsError",
    "NIL_UUID",
    "ParseError",
    "SchemaError",
    "StoreConfig",
    "StoreConnectionError",
    "User",
    "UserNotFoundError",
    "UserResponse",
    "ensure_store",
    "get_settings",
    "hash_password",
    "verify_password",
]
