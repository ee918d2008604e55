"""In-memory fixed-window rate limiter"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Mapping

import structlog

from booking_email.config import settings

logger = structlog.get_logger()

UNKNOWN_CLIENT = "unknown"


@dataclass
class RateLimitEntry:
    """Request counter for one client in its current window"""
    count: int
    reset_time: float


class FixedWindowRateLimiter:
    """
    Per-client fixed-window request counter.

    State lives in process memory only: it is lost on restart and is not
    shared between instances. Entries are overwritten when their window
    rolls over and are never evicted.
    """

    def __init__(
        self,
        max_requests: int = 5,
        window_seconds: float = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._entries: Dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()

    def check(self, client_key: str) -> bool:
        """
        Count a request from client_key.

        Returns:
            True if the request is allowed, False if the quota is used up
        """
        with self._lock:
            now = self._clock()
            entry = self._entries.get(client_key)

            if entry is None or now > entry.reset_time:
                self._entries[client_key] = RateLimitEntry(
                    count=1,
                    reset_time=now + self.window_seconds
                )
                return True

            if entry.count >= self.max_requests:
                return False

            entry.count += 1
            return True

    def get_entry(self, client_key: str) -> RateLimitEntry | None:
        """Current entry for a client, if any"""
        with self._lock:
            return self._entries.get(client_key)

    def reset(self) -> None:
        """Forget all clients"""
        with self._lock:
            self._entries.clear()


def client_key_from_headers(headers: Mapping[str, str]) -> str:
    """
    Identify the client for rate limiting.

    Priority: first hop of X-Forwarded-For, then CF-Connecting-IP. Clients
    that cannot be identified all share the "unknown" quota.
    """
    forwarded_for = headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    connecting_ip = (headers.get("cf-connecting-ip") or "").strip()
    if connecting_ip:
        return connecting_ip

    return UNKNOWN_CLIENT


# Global rate limiter instance
rate_limiter = FixedWindowRateLimiter(
    max_requests=settings.rate_limit_max,
    window_seconds=settings.rate_limit_window_seconds,
)


def get_rate_limiter() -> FixedWindowRateLimiter:
    """FastAPI dependency returning the process-wide limiter"""
    return rate_limiter
