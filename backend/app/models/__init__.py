"""
Pydantic models for database documents.
"""
from app.models.user import User, utc_now

__all__ = [
    "User",
    "utc_now",
]
