"""
User request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """
    Create request body.

    Both fields are optional at the schema level so that a missing field
    is reported by the service with its own message.
    """
    name: Optional[str] = Field(None, description="User name (no Korean characters)")
    email: Optional[str] = Field(None, description="Email address (must contain @)")


class UserCreateResponse(BaseModel):
    """Create response."""
    id: str = Field(..., description="Created user ID")
    message: str = Field(default="User created", description="Success message")


class UserResponse(BaseModel):
    """User record as returned by the read endpoint (plus any extra stored fields)."""
    id: str = Field(..., description="User ID")
    name: str = Field(..., description="User name")
    email: str = Field(..., description="User email")
    created_at: Optional[datetime] = Field(
        None, alias="createdAt", description="Creation timestamp"
    )

    class Config:
        populate_by_name = True
        extra = "allow"


class MessageResponse(BaseModel):
    """Plain confirmation response."""
    message: str = Field(..., description="Confirmation message")
