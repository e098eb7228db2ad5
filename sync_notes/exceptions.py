"""Exception hierarchy for the notes service."""

from __future__ import annotations

from fastapi import status


class ApplicationError(Exception):
    """Base application error with HTTP semantics."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message


class ValidationError(ApplicationError):
    """Malformed identifier or request payload."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"


class AuthorizationError(ApplicationError):
    """Create-note token is unknown, already used or expired."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class StorageError(ApplicationError):
    """The backing directory could not be read or written."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "storage_error"
