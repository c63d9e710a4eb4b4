"""
User Schemas.

Pydantic schemas for user input validation and serialization.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    email: str = Field(
        ...,
        max_length=255,
        description="Unique email address used to sign in",
        examples=["a@x.com"],
    )
    password: str = Field(
        ...,
        max_length=255,
        description="Password, stored as given",
    )


class UserResponse(BaseModel):
    """Schema for a user in responses. Never carries the password."""

    id: int = Field(description="User unique identifier")
    email: str = Field(description="Email address")
    created_at: datetime = Field(description="Registration timestamp")

    model_config = ConfigDict(from_attributes=True)
