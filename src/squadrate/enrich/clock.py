"""
Time sources.

Everything time-dependent (cache freshness, rate windows, provenance
timestamps) reads time through a Clock so tests can control it.
"""

import time
from datetime import datetime, timezone
from typing import Callable

# Returns seconds since the epoch
Clock = Callable[[], float]

system_clock: Clock = time.time


def to_datetime(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class ManualClock:
    """
    A clock that only moves when told to.

    Usage:
        clock = ManualClock(start=1_700_000_000)
        limiter = RateLimiter(clock=clock)
        clock.advance(61)
    """

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
