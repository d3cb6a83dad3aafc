"""Domain error codes for the guestlist client."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    FETCH_FAILED = "FETCH_FAILED"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    SUBMISSION_FAILED = "SUBMISSION_FAILED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class FetchError(DomainError):
    """Raised when the remote event collection cannot be read."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.FETCH_FAILED, message=message)


class ValidationError(DomainError):
    """Raised when a registration misses a required field.

    Only the first unmet requirement is reported.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        self.field = field


class SubmissionError(DomainError):
    """Raised when the backend rejects or fails a guest insert.

    The message is the backend's own text so it can be shown verbatim.
    """

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.SUBMISSION_FAILED, message=message)


class EventNotFoundError(DomainError):
    """Raised when an event is not in the current collection."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is blank."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )
