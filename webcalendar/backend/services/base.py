"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories, validate input, and translate storage
errors into application exceptions.

Usage:
    from webcalendar.backend.services.base import BaseService

    class UserService(BaseService):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(session)
            self.repo = UserRepository(session)

        async def register(self, data: UserCreate) -> User:
            if await self.repo.exists_by_email(data.email):
                raise ConflictError("Email already registered")
            return await self.repo.create(email=data.email, password=data.password)
"""

from typing import Any, TypeVar

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from webcalendar.backend.core.exceptions import (
    ConflictError,
    DatabaseError,
    ValidationError,
)
from webcalendar.backend.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaseService:
    """
    Base class for all services.

    Provides:
    - Database session management
    - Logging context
    - Error wrapping for database operations
    - Common validation patterns

    Subclasses should:
    - Call super().__init__(session) in their __init__
    - Initialize repositories in __init__
    - Implement business logic methods
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize the service with a database session.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        return self._session

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Any,
    ) -> T:
        """
        Execute a database operation with error handling.

        Wraps database operations to convert SQLAlchemy exceptions
        to application-specific exceptions.

        Args:
            operation: Description of the operation for logging
            coro: Coroutine to execute

        Returns:
            Result of the coroutine

        Raises:
            ConflictError: For unique constraint violations
            ValidationError: For check constraint and length violations
            DatabaseError: For other database errors
        """
        try:
            return await coro
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            error_str = str(e).lower()
            if "unique" in error_str or "duplicate" in error_str:
                raise ConflictError("Resource already exists")
            if "check constraint" in error_str:
                raise ValidationError(
                    f"Value rejected by constraint: {operation}",
                    details={"constraint": _constraint_name(error_str)},
                )
            raise DatabaseError(f"Database constraint violation: {operation}")
        except DataError as e:
            # PostgreSQL rejects oversized VARCHAR values before CHECK constraints run
            self._logger.warning(
                "Database data error",
                extra={"operation": operation, "error": str(e)},
            )
            raise ValidationError(f"Value rejected by database: {operation}")
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}")

    def _validate_string_length(
        self,
        value: str,
        field_name: str,
        min_length: int | None = None,
        max_length: int | None = None,
    ) -> None:
        """
        Validate string length constraints.

        Args:
            value: String value to validate
            field_name: Name of the field for error messages
            min_length: Minimum allowed length (optional)
            max_length: Maximum allowed length (optional)

        Raises:
            ValidationError: If string length is out of bounds
        """
        if min_length is not None and len(value) < min_length:
            raise ValidationError(
                f"{field_name} too short",
                details={field_name: f"Minimum length is {min_length}"},
            )
        if max_length is not None and len(value) > max_length:
            raise ValidationError(
                f"{field_name} too long",
                details={field_name: f"Maximum length is {max_length}"},
            )

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )


def _constraint_name(error_str: str) -> str | None:
    """Pull the ck_* constraint name out of a driver error message, if present."""
    for token in error_str.replace('"', " ").replace(":", " ").split():
        if token.startswith("ck_"):
            return token
    return None
