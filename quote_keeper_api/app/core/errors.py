"""
Error taxonomy for the record store.

Every failure an operation can report is one of the classes below.
Services raise them; API endpoints translate them to HTTP responses
using ``status_code``.  Each error carries a human‑readable message.
"""

from fastapi import status


class StoreError(Exception):
    """Base class for all classified record-store failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    """A payload field is missing, empty or out of range."""

    status_code = 422


class NotFoundError(StoreError):
    """An id or name lookup did not match any record."""

    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(StoreError):
    """The caller is not the owner of the record it tried to change."""

    status_code = status.HTTP_403_FORBIDDEN


class DuplicateRegistrationError(StoreError):
    """The caller already has a collector record."""

    status_code = status.HTTP_409_CONFLICT


class InsufficientDataError(StoreError):
    """An aggregate needs more records than are stored."""

    status_code = status.HTTP_409_CONFLICT


class InternalStorageError(StoreError):
    """The underlying collection failed to read or write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
