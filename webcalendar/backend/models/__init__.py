# Importing the models registers them on Base.metadata
from webcalendar.backend.models.base import Base
from webcalendar.backend.models.note import Note
from webcalendar.backend.models.user import User

__all__ = ["Base", "Note", "User"]
