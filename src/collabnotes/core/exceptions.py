"""
Application error taxonomy.

Services and repositories raise these; the API layer maps ``kind`` to a
status code (see ``collabnotes.api.errors``). Messages are user facing and
stable, tests assert on them.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error categories understood by the API boundary."""

    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    RATE_LIMITED = "rate_limited"
    CONFIGURATION = "configuration"
    PERSISTENCE = "persistence"


class AppError(Exception):
    """Base class for all typed application errors."""

    kind: ErrorKind = ErrorKind.PERSISTENCE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(kind={self.kind.value}, message={self.message!r})>"


class ConflictError(AppError):
    kind = ErrorKind.CONFLICT


class UnauthorizedError(AppError):
    kind = ErrorKind.UNAUTHORIZED


class InvalidTokenError(UnauthorizedError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredTokenError(UnauthorizedError):
    def __init__(self, message: str = "Token expired"):
        super().__init__(message)


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND


class ValidationFailedError(AppError):
    """Semantic validation failure (self-share, duplicate collaborator)."""

    kind = ErrorKind.VALIDATION


class RateLimitExceededError(AppError):
    kind = ErrorKind.RATE_LIMITED


class ConfigurationError(AppError):
    """A required setting is missing. Fatal to the operation."""

    kind = ErrorKind.CONFIGURATION


class PersistenceError(AppError):
    kind = ErrorKind.PERSISTENCE
