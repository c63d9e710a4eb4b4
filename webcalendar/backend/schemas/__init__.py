# Pydantic schemas package
from webcalendar.backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from webcalendar.backend.schemas.user import UserCreate, UserResponse

__all__ = [
    "NoteCreate",
    "NoteResponse",
    "NoteUpdate",
    "UserCreate",
    "UserResponse",
]
