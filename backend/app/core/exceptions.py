"""
Error taxonomy for the user directory.

Each error carries the HTTP status it maps to and the key under which its
message is returned in the JSON body.
"""
from fastapi import status


class UserDirectoryError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    body_key: str = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        """JSON body returned to the client."""
        return {self.body_key: self.message}


class ValidationError(UserDirectoryError):
    """Client input is malformed or missing."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(UserDirectoryError):
    """No user matches the lookup."""
    status_code = status.HTTP_404_NOT_FOUND
    body_key = "message"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class ForbiddenError(UserDirectoryError):
    """A policy guard rejected an otherwise valid request."""
    status_code = status.HTTP_403_FORBIDDEN


class MethodNotAllowedError(UserDirectoryError):
    """The endpoint was called with the wrong HTTP verb."""
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, message: str = "Method Not Allowed"):
        super().__init__(message)


class StorageError(UserDirectoryError):
    """The document store failed; the message is passed through verbatim."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
