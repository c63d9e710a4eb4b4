"""
Note Service.

Business logic layer for calendar notes. Orchestrates repositories,
handles validation, and implements business rules.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from webcalendar.backend.core.exceptions import NotFoundError, ValidationError
from webcalendar.backend.models.note import NOTE_CONTENT_MAX_LENGTH, Note
from webcalendar.backend.repositories.note import NoteRepository
from webcalendar.backend.repositories.user import UserRepository
from webcalendar.backend.schemas.note import NoteCreate, NoteUpdate
from webcalendar.backend.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Handles note creation, updates, and calendar queries with
    proper validation and error handling.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)
        self.user_repo = UserRepository(session)

    async def create_note(self, user_id: int, data: NoteCreate) -> Note:
        """
        Create a new note for a user.

        Args:
            user_id: Owning user ID
            data: Note creation data

        Returns:
            Created note

        Raises:
            NotFoundError: If the owning user does not exist
            ValidationError: If content is too long
        """
        self._validate_string_length(
            data.content, "content", max_length=NOTE_CONTENT_MAX_LENGTH
        )

        if not await self.user_repo.exists(user_id):
            raise NotFoundError("User not found")

        self._log_operation("Creating note", user_id=user_id, date=str(data.date))

        note = await self._execute_db_operation(
            "create_note",
            self.repo.create(
                user_id=user_id,
                date=data.date,
                content=data.content,
            ),
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    async def get_note(self, note_id: int) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        return await self.repo.get_by_id(note_id)

    async def list_notes_for_user(
        self,
        user_id: int,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Note]:
        """List a user's notes in calendar order."""
        return await self.repo.get_for_user(user_id, limit=limit, offset=offset)

    async def list_notes_on_date(self, user_id: int, on: date) -> list[Note]:
        """List a user's notes for one calendar date."""
        return await self.repo.get_for_user_on_date(user_id, on)

    async def list_notes_between(
        self,
        user_id: int,
        start: date,
        end: date,
    ) -> list[Note]:
        """
        List a user's notes within an inclusive date range.

        Raises:
            ValidationError: If start is after end
        """
        if start > end:
            raise ValidationError(
                "Invalid date range",
                details={"start": start.isoformat(), "end": end.isoformat()},
            )
        self._log_debug("Listing notes in range", user_id=user_id)
        return await self.repo.get_for_user_between(user_id, start, end)

    async def update_note(self, note_id: int, data: NoteUpdate) -> Note:
        """
        Update an existing note.

        Any change stamps updated_at.

        Args:
            note_id: Note ID to update
            data: Update data (only fields that were set are updated)

        Returns:
            Updated note

        Raises:
            NotFoundError: If note not found
            ValidationError: If new content is too long
        """
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        if not update_data:
            return await self.repo.get_by_id(note_id)

        if "content" in update_data:
            self._validate_string_length(
                update_data["content"], "content", max_length=NOTE_CONTENT_MAX_LENGTH
            )

        self._log_operation(
            "Updating note",
            note_id=note_id,
            fields=list(update_data.keys()),
        )

        return await self._execute_db_operation(
            "update_note",
            self.repo.update(note_id, **update_data),
        )

    async def delete_note(self, note_id: int) -> None:
        """
        Delete a note.

        Raises:
            NotFoundError: If note not found
        """
        self._log_operation("Deleting note", note_id=note_id)

        await self._execute_db_operation(
            "delete_note",
            self.repo.delete(note_id),
        )

    async def remove_from_user(self, user_id: int, note_id: int) -> None:
        """
        Detach a note from its owner's collection.

        Orphan removal deletes the detached note on flush.

        Raises:
            NotFoundError: If the user does not exist or does not own the note
        """
        user = await self.user_repo.get_with_notes(user_id)
        note = next((n for n in user.notes if n.id == note_id), None)

        if note is None:
            raise NotFoundError("Note not found")

        self._log_operation("Removing note from user", user_id=user_id, note_id=note_id)
        user.notes.remove(note)

        await self._execute_db_operation("remove_note", self.session.flush())
