"""
User model for the auth users collection.

Two encodings exist for a User:
- the storage document (``to_document`` / ``from_document``), sparse and
  including the password hash, used only for MongoDB;
- the external form (``to_external``), which never carries the password.
"""
from typing import Any, Optional
from uuid import UUID

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from authstore.core.errors import DecodeError, ParseError
from authstore.schemas.user import UserResponse

NIL_UUID = UUID(int=0)

# Plain fields written to storage only when non-zero, in storage order
SPARSE_FIELDS = (
    "email",
    "first_name",
    "last_name",
    "username",
    "password",
    "role",
    "version",
)


class User(BaseModel):
    """
    User document model for the auth users collection.

    ``id`` is assigned by MongoDB on insert. ``uuid`` and ``version`` are
    assigned by the caller.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(None, alias="_id", description="MongoDB ObjectId")
    uuid: UUID = Field(default=NIL_UUID, description="Stable external identifier")
    email: str = Field(default="", description="Email address")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    username: str = Field(default="", description="Unique login handle")
    password: str = Field(default="", repr=False, description="Bcrypt hashed password")
    role: str = Field(default="", description="Authorization role tag")
    version: int = Field(default=0, description="Unique, caller-allocated version")

    def to_document(self) -> dict[str, Any]:
        """
        Encode the user for storage.

        Zero-valued fields are left out entirely, so the same encoding
        doubles as a query-by-example filter.
        """
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        if self.uuid != NIL_UUID:
            document["uuid"] = str(self.uuid)
        for name in SPARSE_FIELDS:
            value = getattr(self, name)
            if value:
                document[name] = value
        return document

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        """
        Decode a stored document.

        Missing (or null) fields take their zero value. Present fields must
        already have the right type.

        Raises:
            DecodeError: If a field has the wrong type
            ParseError: If the uuid string is not a valid UUID
        """
        present = {key: value for key, value in document.items() if value is not None}
        try:
            stored = _UserDocument.model_validate(present)
        except ValidationError as e:
            raise DecodeError(f"Error decoding user document: {e}") from e

        uid = NIL_UUID
        if stored.uuid:
            try:
                uid = UUID(stored.uuid)
            except ValueError as e:
                raise ParseError(f"Error parsing UUID for user: {stored.uuid!r}") from e

        return cls(
            id=stored.id,
            uuid=uid,
            email=stored.email,
            first_name=stored.first_name,
            last_name=stored.last_name,
            username=stored.username,
            password=stored.password,
            role=stored.role,
            version=stored.version,
        )

    def to_external(self) -> dict[str, Any]:
        """External transfer form as a dict (no password)."""
        return UserResponse.from_user(self).model_dump(by_alias=True)

    def to_external_json(self) -> str:
        """External transfer form as JSON (no password)."""
        return UserResponse.from_user(self).model_dump_json(by_alias=True)


class _UserDocument(BaseModel):
    """Strict view of a stored user document, used only for decoding."""

    model_config = ConfigDict(strict=True, extra="ignore", arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(None, alias="_id")
    uuid: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    password: str = ""
    role: str = ""
    version: int = 0
