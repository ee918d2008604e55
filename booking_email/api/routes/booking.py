"""Booking form endpoint"""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
import structlog

from booking_email.config import settings
from booking_email.errors import BookingValidationError, DeliveryError, RateLimitError
from booking_email.models import BookingRequest
from booking_email.services.email_service import EmailService, get_email_service
from booking_email.services.rate_limiter import (
    FixedWindowRateLimiter,
    client_key_from_headers,
    get_rate_limiter,
)
from booking_email.utils.validation import validate_booking

logger = structlog.get_logger()
router = APIRouter()


@router.options("/send-booking-email")
async def booking_email_preflight():
    """
    CORS preflight: empty 200 with the cross-origin headers
    """
    return Response(status_code=200, headers=settings.cors_headers)


@router.post("/send-booking-email")
async def send_booking_email(
    request: Request,
    limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
    mailer: EmailService = Depends(get_email_service),
):
    """
    Public booking form submission.

    Rate limited per client, validated, escaped and forwarded to the site
    owner by email. Errors are rendered by the BookingError handler in
    main.py so every response carries the CORS headers.
    """
    client_ip = client_key_from_headers(request.headers)

    # Must stay ahead of the first await so check-and-count is atomic
    if not limiter.check(client_ip):
        logger.warning("rate_limit_exceeded", client_ip=client_ip)
        raise RateLimitError()

    try:
        payload = await request.json()

        validation = validate_booking(payload)
        if not validation.valid:
            logger.info(
                "booking_validation_failed",
                client_ip=client_ip,
                error=validation.error
            )
            raise BookingValidationError(validation.error)

        booking = BookingRequest.from_payload(payload)

        logger.info(
            "booking_request_received",
            client_ip=client_ip,
            service=booking.service,
            urgent=booking.urgent
        )

        result = await mailer.send_booking_notification(booking)

    except BookingValidationError:
        raise
    except Exception as e:
        logger.error(
            "booking_email_failed",
            client_ip=client_ip,
            error=str(e),
            exc_info=True
        )
        raise DeliveryError() from e

    return JSONResponse(
        status_code=200,
        content=result,
        headers=settings.cors_headers
    )
