"""Email delivery through Resend"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import resend
import structlog
from fastapi.concurrency import run_in_threadpool

from booking_email.config import settings
from booking_email.errors import DeliveryError
from booking_email.models import BookingRequest
from booking_email.services.email_templates import render_booking_email

logger = structlog.get_logger()


class EmailService:
    """
    Sends booking notifications to the site owner via the Resend API.

    A single attempt is made per call. Without an API key the service
    still starts, but every send fails with DeliveryError.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        from_address: Optional[str] = None,
        from_name: Optional[str] = None,
        recipient: Optional[str] = None,
        site_name: Optional[str] = None,
    ):
        self.api_key = settings.resend_api_key if api_key is None else api_key
        self.from_address = from_address or settings.email_from_address
        self.from_name = from_name or settings.email_from_name
        self.recipient = recipient or settings.booking_recipient
        self.site_name = site_name or settings.site_name

        if self.api_key:
            logger.info("Initialized Resend email client", from_address=self.from_address)
        else:
            logger.warning("No email provider configured - RESEND_API_KEY missing")

    @property
    def sender(self) -> str:
        return f"{self.from_name} <{self.from_address}>"

    def _send(self, params: Dict[str, Any]) -> Dict[str, Any]:
        resend.api_key = self.api_key
        return resend.Emails.send(params)

    async def send_email(
        self,
        to: List[str],
        subject: str,
        html: str,
    ) -> Dict[str, Any]:
        """
        Send one HTML email.

        Args:
            to: Recipient addresses
            subject: Subject line (already escaped)
            html: HTML body (already escaped)

        Returns:
            Resend response payload, e.g. {"id": "..."}

        Raises:
            DeliveryError: If no API key is configured
        """
        if not self.api_key:
            raise DeliveryError("Email service not configured - missing API key")

        params = {
            "from": self.sender,
            "to": to,
            "subject": subject,
            "html": html,
        }

        logger.info("Sending email", to=to, subject=subject)
        # The Resend SDK is blocking
        response = await run_in_threadpool(self._send, params)
        return dict(response)

    async def send_booking_notification(self, booking: BookingRequest) -> Dict[str, Any]:
        """Render a booking request and send it to the fixed recipient"""
        email = render_booking_email(booking, site_name=self.site_name)

        response = await self.send_email(
            to=[self.recipient],
            subject=email.subject,
            html=email.html,
        )

        logger.info(
            "booking_email_sent",
            email_id=response.get("id"),
            urgent=booking.urgent,
            sent_at=datetime.now(timezone.utc).isoformat(),
        )
        return response


# Global email service instance
email_service = EmailService()


def get_email_service() -> EmailService:
    """FastAPI dependency returning the process-wide email service"""
    return email_service
