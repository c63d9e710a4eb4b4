"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model.
"""

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from webcalendar.backend.models.note import Note
from webcalendar.backend.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits standard CRUD operations from BaseRepository
    and adds per-user calendar queries.
    """

    model = Note

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_for_user(
        self,
        user_id: int,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Note]:
        """
        Get a user's notes in calendar order.

        Args:
            user_id: Owning user ID
            limit: Maximum number of notes to return
            offset: Number of notes to skip

        Returns:
            Notes ordered by date, then creation order
        """
        result = await self.session.execute(
            select(Note)
            .where(Note.user_id == user_id)
            .order_by(Note.date, Note.id)
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def get_for_user_on_date(self, user_id: int, on: date) -> list[Note]:
        """Get a user's notes attached to a single calendar date."""
        result = await self.session.execute(
            select(Note)
            .where(Note.user_id == user_id)
            .where(Note.date == on)
            .order_by(Note.id)
        )
        return list(result.scalars().all())

    async def get_for_user_between(
        self,
        user_id: int,
        start: date,
        end: date,
    ) -> list[Note]:
        """
        Get a user's notes whose date falls in an inclusive range.

        Args:
            user_id: Owning user ID
            start: First date of the range
            end: Last date of the range

        Returns:
            Notes ordered by date, then creation order
        """
        result = await self.session.execute(
            select(Note)
            .where(Note.user_id == user_id)
            .where(Note.date >= start)
            .where(Note.date <= end)
            .order_by(Note.date, Note.id)
        )
        return list(result.scalars().all())

    async def count_for_user(self, user_id: int) -> int:
        """Get number of notes owned by a user."""
        result = await self.session.execute(
            select(func.count())
            .select_from(Note)
            .where(Note.user_id == user_id)
        )
        return result.scalar_one()
