"""Booking payload validation"""

import re
from typing import Any

from booking_email.models import ValidationResult


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# (field, label used in messages, max length, "too long" message)
REQUIRED_FIELDS = [
    ("name", "Name", 100, "Name is too long"),
    ("phone", "Phone", 30, "Phone number is too long"),
    ("service", "Service", 100, "Service name is too long"),
]

EMAIL_MAX_LENGTH = 255
MESSAGE_MAX_LENGTH = 2000
DATE_MAX_LENGTH = 50


def _invalid(error: str) -> ValidationResult:
    return ValidationResult(valid=False, error=error)


def validate_booking(data: Any) -> ValidationResult:
    """
    Validate a raw booking payload.

    Rules run top to bottom and the first failure is returned; the
    remaining fields are not inspected.

    Args:
        data: Decoded JSON body

    Returns:
        ValidationResult with the first error message, if any
    """
    if not isinstance(data, dict):
        return _invalid("Invalid request body")

    for key, label, max_length, too_long in REQUIRED_FIELDS:
        value = data.get(key)
        if not isinstance(value, str) or not value.strip():
            return _invalid(f"{label} is required")
        if len(value.strip()) > max_length:
            return _invalid(too_long)

    for key in ("email", "date", "message"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            return _invalid(f"{key.capitalize()} must be a string")

    # Optional fields are checked as sent, untrimmed. Empty and absent
    # email are treated the same: no check, no row.
    email = data.get("email")
    if email:
        if not EMAIL_PATTERN.fullmatch(email):
            return _invalid("Invalid email format")
        if len(email) > EMAIL_MAX_LENGTH:
            return _invalid("Email is too long")

    message = data.get("message")
    if message and len(message) > MESSAGE_MAX_LENGTH:
        return _invalid("Message is too long")

    date = data.get("date")
    if date and len(date) > DATE_MAX_LENGTH:
        return _invalid("Date is too long")

    return ValidationResult(valid=True)
