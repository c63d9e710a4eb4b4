"""
Application Exceptions.

Services raise these instead of leaking SQLAlchemy errors to callers.
Every exception carries a stable error code:

    RES_NOT_FOUND         unknown user or note id
    RES_CONFLICT          email already registered
    VAL_VALIDATION_ERROR  content too long, reversed date range
    SYS_DATABASE_ERROR    any other storage failure
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """A user or note with the requested id does not exist."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """Input was rejected by the service or by a database constraint."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class ConflictError(ApplicationError):
    """A unique value is already taken, e.g. a registered email."""

    def __init__(self, message: str = "Resource conflict") -> None:
        super().__init__(message, code="RES_CONFLICT")


class DatabaseError(ApplicationError):
    """Storage failure with no more specific mapping."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")
