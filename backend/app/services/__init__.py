"""
Service layer for business logic.
"""
from app.services.user_service import UserService

__all__ = [
    "UserService",
]
