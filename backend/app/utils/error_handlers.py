"""
Centralized error handling and user-friendly error messages.
"""
import logging
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """Validation error.

    ``errors`` holds the ``(field, message)`` pairs in the order they were found;
    the message is their human-readable join.
    """
    def __init__(self, errors: list[tuple[str, str]]):
        self.errors = list(errors)
        message = join_field_errors(self.errors) or get_error_message("validation_error")
        super().__init__(message, status_code=400)


class DuplicateEmailError(AppError):
    """Email already registered (unique constraint on candidates.email)."""
    def __init__(self, message: str | None = None):
        super().__init__(message or get_error_message("email_exists"), status_code=409)


class DatabaseError(AppError):
    """Database error."""
    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, status_code=500)


# User-friendly error messages
ERROR_MESSAGES = {
    "email_exists": "duplicate key value violates unique constraint on email: "
                    "a candidate with this email already exists.",
    "server_error": "Something went wrong on our end. Please try again later.",
    "database_error": "Database connection issue. Please try again later.",
    "validation_error": "Please check your input and try again.",
}


def get_error_message(error_key: str, default: str | None = None) -> str:
    """Get a user-friendly error message."""
    return ERROR_MESSAGES.get(error_key, default or ERROR_MESSAGES["server_error"])


def join_field_errors(errors: list[tuple[str, str]]) -> str:
    # Messages already name their field.
    return "; ".join(message for _, message in errors)


def _is_unique_violation(error: IntegrityError) -> bool:
    # Postgres: "duplicate key value violates unique constraint"
    # SQLite:   "UNIQUE constraint failed: candidates.email"
    # MySQL:    "Duplicate entry '...' for key 'uq_candidates_email'"
    error_str = str(getattr(error, "orig", None) or error).lower()
    return "unique" in error_str or "duplicate" in error_str


def handle_database_error(error: Exception, operation: str = "") -> AppError:
    """Translate a store exception into the matching application error."""
    if isinstance(error, AppError):
        return error

    if isinstance(error, IntegrityError) and _is_unique_violation(error):
        logger.warning("Unique constraint violated during %s: %s", operation, error.orig)
        return DuplicateEmailError()

    logger.error("Database error during %s: %s", operation, error)
    if isinstance(error, SQLAlchemyError):
        root = getattr(error, "orig", None)
        return DatabaseError(str(root) if root else str(error))
    return DatabaseError(str(error) or get_error_message("server_error"))


def create_error_response(status_code: int, message: str) -> JSONResponse:
    """Create a standardized `{"error": ...}` response."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
    )
