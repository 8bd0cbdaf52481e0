"""
User model for the user directory database.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class User(BaseModel):
    """
    User document model for the ``users`` collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Display name, used as the lookup key")
    email: str = Field(..., description="Email address (must contain @)")
    created_at: datetime = Field(
        default_factory=utc_now,
        alias="createdAt",
        description="Creation timestamp, never modified",
    )

    class Config:
        populate_by_name = True

    def to_document(self) -> dict:
        """Document to insert, without the store-assigned id."""
        return self.model_dump(by_alias=True, exclude={"id"})
