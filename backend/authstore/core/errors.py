"""
Error types raised by the auth store.
"""

INVALID_CREDENTIALS_MESSAGE = "Login: Invalid credentials"


class AuthStoreError(Exception):
    """Base class for all auth store errors."""


class StoreConnectionError(AuthStoreError, ConnectionError):
    """The database client could not be created or could not reach the server."""


class SchemaError(AuthStoreError):
    """Collection or index creation failed for a reason other than pre-existence."""


class UserNotFoundError(AuthStoreError):
    """No stored user matched the lookup."""


class InvalidCredentialsError(AuthStoreError):
    """
    Unknown username or wrong password.

    Both cases carry the same message so callers cannot tell
    which one happened.
    """

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS_MESSAGE)


class DuplicateUserError(AuthStoreError):
    """Insert rejected by a uniqueness index (username or version)."""


class DecodeError(AuthStoreError):
    """A stored user document has a field of the wrong type."""


class ParseError(DecodeError):
    """A stored uuid string is not a valid UUID."""
