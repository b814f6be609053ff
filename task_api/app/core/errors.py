"""
Error types raised by the store and service layers.

Every failure that can reach the HTTP boundary is one of the four
classes below.  The handler maps them to status codes by type, so new
failure modes must be expressed as one of these rather than as a bare
exception.
"""


class TaskAPIError(Exception):
    """Base class for all task errors.  ``str(err)`` is the message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(TaskAPIError):
    """Input violates a business rule (e.g. empty title)."""


class NotFoundError(TaskAPIError):
    """The requested task does not exist."""


class StoreError(TaskAPIError):
    """The database failed to execute a statement."""


class DecodeError(TaskAPIError):
    """The request body is not a valid task payload."""
