"""
Document models.
"""
from authstore.models.user import NIL_UUID, User

__all__ = ["NIL_UUID", "User"]
