"""
User Model.

A registered calendar user. Owns its notes: deleting a user, or removing
a note from its collection, deletes the note.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webcalendar.backend.models.base import Base, CreatedAtMixin, IntegerIdMixin

if TYPE_CHECKING:
    from webcalendar.backend.models.note import Note


class User(IntegerIdMixin, CreatedAtMixin, Base):
    """
    User database model.

    The password column holds the value exactly as supplied.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    notes: Mapped[list["Note"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"
