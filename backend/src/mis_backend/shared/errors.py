"""Domain error hierarchy shared by repositories and services.

Every error carries an explicit :class:`ErrorKind` chosen where it is raised.
The API layer maps the kind to an HTTP status; nothing downstream inspects
the message text.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Classification used to translate domain failures into responses."""

    UNAUTHORIZED = "unauthorized"
    VALIDATION = "validation"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class MisError(Exception):
    """Base class for all expected backend failures."""

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL
    default_message: ClassVar[str] = "Unexpected failure"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthorizedError(MisError):
    """Raised when a request carries no valid session."""

    kind = ErrorKind.UNAUTHORIZED
    default_message = "Authentication required"


class ValidationError(MisError):
    """Raised when caller-supplied data breaks a business rule."""

    kind = ErrorKind.VALIDATION
    default_message = "Invalid request"


class DuplicateError(MisError):
    """Raised when a unique value is already taken."""

    kind = ErrorKind.DUPLICATE
    default_message = "Entry already exists"


class NotFoundError(MisError):
    """Raised when the addressed record does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Entry not found"


class InternalError(MisError):
    """Raised when persistence fails for reasons the caller cannot fix."""

    kind = ErrorKind.INTERNAL


__all__ = [
    "DuplicateError",
    "ErrorKind",
    "InternalError",
    "MisError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
