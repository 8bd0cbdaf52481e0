"""
Core module - Validation, error taxonomy, and logging setup.
"""
from app.core.exceptions import (
    UserDirectoryError,
    ValidationError,
    NotFoundError,
    ForbiddenError,
    MethodNotAllowedError,
    StorageError,
)
from app.core.validators import contains_hangul, is_valid_email, is_valid_field_name
from app.core.logging_config import setup_logging

__all__ = [
    "UserDirectoryError",
    "ValidationError",
    "NotFoundError",
    "ForbiddenError",
    "MethodNotAllowedError",
    "StorageError",
    "contains_hangul",
    "is_valid_email",
    "is_valid_field_name",
    "setup_logging",
]
