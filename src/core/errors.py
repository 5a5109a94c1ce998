"""
Custom exceptions and error handling for Travel Bucket.

Defines application-specific exceptions with error codes so handlers can
turn any failure into a consistent, client-safe response.

Usage:
    from core.errors import StorageError, ErrorCode

    raise StorageError("insert failed", code=ErrorCode.STORAGE_FAILED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Place errors
    PLACE_NOT_FOUND = "PLACE_NOT_FOUND"

    # Storage errors
    STORAGE_FAILED = "STORAGE_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.PLACE_NOT_FOUND: "Travel place not found.",
    ErrorCode.STORAGE_FAILED: "Unable to reach the travel bucket list right now. Please try again.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TravelBucketError(Exception):
    """Base exception for all Travel Bucket errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class StorageError(TravelBucketError):
    """The persistence backend failed to complete a read or write."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORAGE_FAILED):
        super().__init__(message, code=code)


class PlaceNotFoundError(TravelBucketError):
    """An update targeted a place id that does not exist."""

    def __init__(self, place_id: int):
        self.place_id = place_id
        super().__init__(f"Travel place {place_id} does not exist", code=ErrorCode.PLACE_NOT_FOUND)


class ValidationError(TravelBucketError):
    """Input validation or request parsing failed."""

    pass
