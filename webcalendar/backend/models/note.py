"""
Note Model.

A calendar note attached to a single date and owned by a single user.
"""

from datetime import date as date_type
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webcalendar.backend.models.base import Base, IntegerIdMixin, TimestampMixin

if TYPE_CHECKING:
    from webcalendar.backend.models.user import User

NOTE_CONTENT_MAX_LENGTH = 2000


class Note(IntegerIdMixin, TimestampMixin, Base):
    """
    Note database model.

    Content is capped both by the VARCHAR length and by a named check
    constraint, since SQLite does not enforce VARCHAR lengths.
    """

    __tablename__ = "notes"
    __table_args__ = (
        CheckConstraint(
            f"length(content) <= {NOTE_CONTENT_MAX_LENGTH}",
            name="ck_notes_content_length",
        ),
        Index("ix_notes_user_id_date", "user_id", "date"),
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[date_type] = mapped_column(
        Date,
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        String(NOTE_CONTENT_MAX_LENGTH),
        nullable=False,
    )

    user: Mapped["User"] = relationship(back_populates="notes")

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, user_id={self.user_id}, date={self.date})>"
