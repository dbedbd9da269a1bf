"""
Auth database configuration.
Stores user identity and authentication data.
"""
from pydantic import BaseModel
from pymongo import ASCENDING, DESCENDING

DB_NAME = "auth_db"


class Collections:
    """Collection names in auth_db."""
    USERS = "users"


class IndexConfig(BaseModel):
    """Single-field index definition."""

    name: str
    field: str
    unique: bool = False
    descending: bool = False

    @property
    def keys(self) -> list[tuple[str, int]]:
        return [(self.field, DESCENDING if self.descending else ASCENDING)]

    def matches(self, info: dict) -> bool:
        """Compare against one entry of ``Collection.index_information()``."""
        existing_keys = list(info.get("key", []))
        # Special index types ("text", "hashed", "2dsphere") never match
        if any(
            isinstance(direction, bool) or not isinstance(direction, (int, float))
            for _, direction in existing_keys
        ):
            return False
        existing_keys = [(field, int(direction)) for field, direction in existing_keys]
        return existing_keys == self.keys and bool(info.get("unique", False)) == self.unique


# Exactly these indexes are kept on the users collection
USER_INDEXES = [
    IndexConfig(name="username_index", field="username", unique=True),
    IndexConfig(name="version_index", field="version", unique=True, descending=True),
]
