"""
User response schemas.
"""
from typing import TYPE_CHECKING

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from authstore.models.user import User

# Display form of an unsaved user's id
NIL_OBJECT_ID = ObjectId(b"\x00" * 12)


class UserResponse(BaseModel):
    """
    User information for outside callers (excludes sensitive data).

    There is deliberately no password or version field here.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User ObjectId as hex string")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    email: str = Field(default="", description="Email address")
    username: str = Field(default="", description="Login handle")
    role: str = Field(default="", description="Authorization role tag")
    uuid: str = Field(..., description="Stable external identifier")

    @classmethod
    def from_user(cls, user: "User") -> "UserResponse":
        object_id = user.id if user.id is not None else NIL_OBJECT_ID
        return cls(
            id=str(object_id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            username=user.username,
            role=user.role,
            uuid=str(user.uuid),
        )
