"""
User Service.

Business logic layer for users: registration with email uniqueness,
lookup by email, and account deletion (which takes the user's notes
with it).
"""

from sqlalchemy.ext.asyncio import AsyncSession

from webcalendar.backend.core.exceptions import ConflictError
from webcalendar.backend.models.user import User
from webcalendar.backend.repositories.user import UserRepository
from webcalendar.backend.schemas.user import UserCreate
from webcalendar.backend.services.base import BaseService


class UserService(BaseService):
    """
    Service for user business logic.

    Passwords are persisted exactly as supplied; no hashing is applied.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = UserRepository(session)

    async def register(self, data: UserCreate) -> User:
        """
        Register a new user.

        Args:
            data: Registration data

        Returns:
            Created user

        Raises:
            ConflictError: If the email is already registered
        """
        if await self.repo.exists_by_email(data.email):
            self._log_debug("Registration rejected, email taken", email=data.email)
            raise ConflictError("Email already registered")

        self._log_operation("Registering user", email=data.email)

        # The unique index still guards against a concurrent registration
        user = await self._execute_db_operation(
            "register_user",
            self.repo.create(email=data.email, password=data.password),
        )

        self._log_debug("User registered", user_id=user.id)
        return user

    async def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            NotFoundError: If user not found
        """
        return await self.repo.get_by_id(user_id)

    async def find_by_email(self, email: str) -> User | None:
        """Find a user by exact email, or None."""
        return await self.repo.find_by_email(email)

    async def email_taken(self, email: str) -> bool:
        """Check whether an email is already registered."""
        return await self.repo.exists_by_email(email)

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user and, by cascade, all of its notes.

        Raises:
            NotFoundError: If user not found
        """
        self._log_operation("Deleting user", user_id=user_id)

        await self._execute_db_operation(
            "delete_user",
            self.repo.delete(user_id),
        )
