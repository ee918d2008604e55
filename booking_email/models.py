"""Booking request data models"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class BookingRequest(BaseModel):
    """Booking request submitted from the website form"""
    name: str = Field(..., description="Customer name")
    phone: str = Field(..., description="Contact phone number")
    service: str = Field(..., description="Requested service")
    email: Optional[str] = Field(None, description="Optional contact email")
    date: Optional[str] = Field(None, description="Preferred date, free text")
    message: Optional[str] = Field(None, description="Free-form message")
    urgent: bool = Field(False, description="Customer marked the request as urgent")

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "BookingRequest":
        """
        Build a request from an already validated JSON payload.

        Strings are trimmed; empty optional fields become None.
        """
        def clean(key: str) -> Optional[str]:
            value = data.get(key)
            if not isinstance(value, str):
                return None
            return value.strip() or None

        return cls(
            name=data["name"].strip(),
            phone=data["phone"].strip(),
            service=data["service"].strip(),
            email=clean("email"),
            date=clean("date"),
            message=clean("message"),
            urgent=bool(data.get("urgent")),
        )


class ValidationResult(BaseModel):
    """Outcome of validating a booking payload"""
    valid: bool
    error: Optional[str] = None


class RenderedEmail(BaseModel):
    """Subject and HTML body ready to hand to the email provider"""
    subject: str
    html: str
