"""Booking request errors

Each error carries the HTTP status and a message that is safe to return
to the caller. Internal detail belongs in the logs only.
"""


class BookingError(Exception):
    """Base exception for booking request failures"""
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class BookingValidationError(BookingError):
    """Client sent a payload that failed validation"""
    status_code = 400
    message = "Invalid request"


class RateLimitError(BookingError):
    """Client exceeded the request quota for the current window"""
    status_code = 429
    message = "Too many requests. Please try again later."


class DeliveryError(BookingError):
    """Email could not be sent, or anything else went wrong on our side"""
    status_code = 500
    message = "Failed to send booking request. Please try again later."
