"""Pytest configuration and fixtures for booking email tests."""
import pytest
from fastapi.testclient import TestClient

from booking_email.main import app
from booking_email.services.email_service import EmailService, get_email_service
from booking_email.services.rate_limiter import FixedWindowRateLimiter, get_rate_limiter


class FakeClock:
    """Manually advanced clock in seconds."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingEmailService(EmailService):
    """Email service that records Resend params instead of calling the API."""

    def __init__(self, fail_with: Exception | None = None, **kwargs):
        kwargs.setdefault("api_key", "re_test_key")
        kwargs.setdefault("from_address", "noreply@tiptop-service.ch")
        kwargs.setdefault("from_name", "TipTop Service")
        kwargs.setdefault("recipient", "tiptopch@proton.me")
        kwargs.setdefault("site_name", "HandyMan Swiss")
        super().__init__(**kwargs)
        self.fail_with = fail_with
        self.sent = []

    def _send(self, params):
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(params)
        return {"id": f"email-{len(self.sent)}"}


@pytest.fixture(scope="function")
def clock():
    """Fake clock shared by the rate limiter under test."""
    return FakeClock()


@pytest.fixture(scope="function")
def limiter(clock):
    """Fresh limiter with the production quota: 5 requests per 60 seconds."""
    return FixedWindowRateLimiter(max_requests=5, window_seconds=60, clock=clock)


@pytest.fixture(scope="function")
def mailer():
    """Email service that never touches the network."""
    return RecordingEmailService()


@pytest.fixture(scope="function")
def client(limiter, mailer):
    """Test client with the limiter and mailer swapped in."""
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    app.dependency_overrides[get_email_service] = lambda: mailer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def valid_booking():
    """Minimal payload that passes validation."""
    return {
        "name": "Jean",
        "phone": "+41791234567",
        "service": "Plumbing",
    }
