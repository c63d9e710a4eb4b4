"""
User Repository.

Data access layer for users, including the email lookups used at
sign-in and registration.
"""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from webcalendar.backend.core.exceptions import NotFoundError
from webcalendar.backend.models.user import User
from webcalendar.backend.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for User model.

    Inherits standard CRUD operations from BaseRepository
    and adds lookups on the unique email column.
    """

    model = User

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def find_by_email(self, email: str) -> User | None:
        """
        Find a user by exact email address.

        Args:
            email: Email address to search for

        Returns:
            The user, or None when no user has this email
        """
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """
        Check whether a user with this exact email exists.

        Args:
            email: Email address to check

        Returns:
            True if a user has this email, False otherwise
        """
        result = await self.session.execute(
            select(exists().where(User.email == email))
        )
        return bool(result.scalar())

    async def get_with_notes(self, id: int) -> User:
        """
        Get a user with its notes collection loaded.

        The collection must be loaded before notes can be removed from it
        (orphan removal) inside an async session.

        Raises:
            NotFoundError: If user not found
        """
        result = await self.session.execute(
            select(User)
            .where(User.id == id)
            .options(selectinload(User.notes))
            .execution_options(populate_existing=True)
        )
        user = result.scalar_one_or_none()

        if user is None:
            raise NotFoundError("User not found")

        return user
