"""
Fixed-window limiter for outbound fetch attempts.

The limiter never waits: a denied caller skips the network tier and
falls back to dataset data.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from squadrate.config import settings
from squadrate.enrich.clock import Clock, system_clock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateWindow:
    request_count: int
    reset_at: float
    max_requests: int


class RateLimiter:
    """
    Allows at most `max_requests` attempts per `window` seconds.

    The window starts on the first request after the previous one expired.
    """

    def __init__(
        self,
        max_requests: Optional[int] = None,
        window: Optional[float] = None,
        clock: Clock = system_clock,
    ):
        self.max_requests = max_requests if max_requests is not None else settings.rate_limit_max_requests
        self.window = window if window is not None else settings.rate_limit_window_seconds
        self.clock = clock
        self._count = 0
        self._reset_at = 0.0

    def try_acquire(self) -> bool:
        """
        Take one request slot if available.

        Returns:
            True if the caller may make a request, False if the window is full
        """
        now = self.clock()
        if now > self._reset_at:
            self._count = 0
            self._reset_at = now + self.window

        if self._count >= self.max_requests:
            logger.warning(
                f"Rate limit reached ({self.max_requests} per {self.window:.0f}s), "
                f"resets in {self._reset_at - now:.0f}s"
            )
            return False

        self._count += 1
        return True

    def snapshot(self) -> RateWindow:
        return RateWindow(
            request_count=self._count,
            reset_at=self._reset_at,
            max_requests=self.max_requests,
        )
