"""
Note Schemas.

Pydantic schemas for note input validation and serialization.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field

from webcalendar.backend.models.note import NOTE_CONTENT_MAX_LENGTH


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    date: datetime.date = Field(
        ...,
        description="Calendar date the note is attached to",
        examples=["2024-01-01"],
    )
    content: str = Field(
        ...,
        max_length=NOTE_CONTENT_MAX_LENGTH,
        description="Note content",
        examples=["Dentist at 10:00"],
    )


class NoteUpdate(BaseModel):
    """Schema for updating an existing note. Unset fields are left alone."""

    date: datetime.date | None = Field(
        default=None,
        description="Calendar date the note is attached to",
    )
    content: str | None = Field(
        default=None,
        max_length=NOTE_CONTENT_MAX_LENGTH,
        description="Note content",
    )


class NoteResponse(BaseModel):
    """Schema for a note in responses."""

    id: int = Field(description="Note unique identifier")
    user_id: int = Field(description="Owning user")
    date: datetime.date = Field(description="Calendar date")
    content: str = Field(description="Note content")
    created_at: datetime.datetime = Field(description="Creation timestamp")
    updated_at: datetime.datetime | None = Field(description="Last update timestamp, if ever updated")

    model_config = ConfigDict(from_attributes=True)
