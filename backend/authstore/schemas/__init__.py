"""
Pydantic schemas for the external transfer form.
"""
from authstore.schemas.user import UserResponse

__all__ = ["UserResponse"]
