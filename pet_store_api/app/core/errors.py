"""
Error types shared by the store and the service layer.

Every failure raised while serving a request is a ``PetServiceError``
tagged with an ``ErrorKind``.  The error keeps two pieces of text
apart: ``message`` is safe to send back to the client, while
``cause`` holds the underlying exception (for example a pydantic
``ValidationError``) and only ever reaches the logs.

The HTTP status for an error is decided by ``status_for_error``.
Kinds that are missing from the mapping fall back to 500.
"""

from enum import Enum
from typing import Dict, Optional

from fastapi import status


class ErrorKind(str, Enum):
    """Category of a request failure."""

    UNKNOWN = "unknown"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    DUPLICATE_KEY = "duplicate_key"


class PetServiceError(Exception):
    """Base class for errors that are rendered as HTTP responses."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} : {self.cause}"


class UnknownError(PetServiceError):
    """An internal invariant was violated."""

    kind = ErrorKind.UNKNOWN


class InvalidInputError(PetServiceError):
    """The request carried a malformed id or body."""

    kind = ErrorKind.INVALID_INPUT


class NotFoundError(PetServiceError):
    """No record exists for the requested id."""

    kind = ErrorKind.NOT_FOUND


class DuplicateKeyError(PetServiceError):
    """A record already exists for the id being created."""

    kind = ErrorKind.DUPLICATE_KEY


class StoreConfigError(Exception):
    """The configured storage backend cannot be built."""


# Duplicate keys are reported as 500 rather than 409 Conflict; see
# DESIGN.md before changing this.
_STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE_KEY: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for_error(error: BaseException) -> int:
    """Return the HTTP status code used to report ``error``."""
    kind = getattr(error, "kind", None)
    return _STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
