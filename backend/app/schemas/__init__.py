"""
Request and response schemas for API endpoints.
"""
from app.schemas.user import (
    UserCreate,
    UserCreateResponse,
    UserResponse,
    MessageResponse,
)

__all__ = [
    "UserCreate",
    "UserCreateResponse",
    "UserResponse",
    "MessageResponse",
]
