"""Exception types raised by the hotel booking core."""

from __future__ import annotations

from enum import Enum


class ValidationReason(str, Enum):
    MISSING_DATES = "missing_dates"
    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_GUEST_COUNT = "invalid_guest_count"
    OVER_CAPACITY = "over_capacity"
    NO_ROOM_SELECTED = "no_room_selected"
    UNKNOWN_ROOM = "unknown_room"


class AuthReason(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"


VALIDATION_MESSAGES = {
    ValidationReason.MISSING_DATES: "Please select check-in and check-out dates",
    ValidationReason.INVALID_DATE_RANGE: "Check-out date must be after the check-in date.",
    ValidationReason.INVALID_GUEST_COUNT: "At least one guest is required.",
    ValidationReason.OVER_CAPACITY: "Too many guests for the selected room.",
    ValidationReason.NO_ROOM_SELECTED: "Please choose a room before booking.",
    ValidationReason.UNKNOWN_ROOM: "The selected room is no longer available.",
}


class HotelBookingError(RuntimeError):
    """Base class for every error the booking core raises."""


class ValidationError(HotelBookingError, ValueError):
    """Raised when user input cannot be accepted; nothing is written to the store."""

    def __init__(self, reason: ValidationReason, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or VALIDATION_MESSAGES[reason])


class AuthError(HotelBookingError):
    """Raised when a login attempt does not match any stored user."""

    def __init__(self, reason: AuthReason = AuthReason.INVALID_CREDENTIALS) -> None:
        self.reason = reason
        super().__init__("Invalid credentials")


class StoreError(HotelBookingError):
    """Raised when a value cannot be written to the persisted store."""


class CatalogAPIError(HotelBookingError):
    """Raised when the remote room catalog responds with an error or unexpected payload."""


class InstallStateError(HotelBookingError):
    """Raised on an install transition that is not allowed from the current status."""


__all__ = [
    "AuthError",
    "AuthReason",
    "CatalogAPIError",
    "HotelBookingError",
    "InstallStateError",
    "StoreError",
    "ValidationError",
    "ValidationReason",
]
