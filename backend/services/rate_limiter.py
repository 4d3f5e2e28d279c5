"""
Fixed-window request counter keyed by client IP. Guards the public
quick-estimate endpoint; the estimate function itself is never limited.
"""
import logging
import math
import time

from pydantic import BaseModel

from config import RATE_LIMIT_WINDOW_SECONDS, RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_CLEANUP_THRESHOLD

logger = logging.getLogger(__name__)


class RateLimitStatus(BaseModel):
    allowed: bool
    limit: int
    remaining: int
    reset_in: int  # seconds until the window resets


class FixedWindowRateLimiter:
    def __init__(
        self,
        window_seconds: int = RATE_LIMIT_WINDOW_SECONDS,
        max_requests: int = RATE_LIMIT_MAX_REQUESTS,
        cleanup_threshold: int = RATE_LIMIT_CLEANUP_THRESHOLD,
        clock=time.monotonic,
    ):
        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self.cleanup_threshold = cleanup_threshold
        self._clock = clock
        # key -> [count, window reset time]
        self._windows = {}

    def __len__(self):
        return len(self._windows)

    def check(self, key: str) -> RateLimitStatus:
        """Count one request for key and report whether it is allowed."""
        now = self._clock()
        if len(self._windows) > self.cleanup_threshold:
            self.cleanup(now)

        window = self._windows.get(key)
        if window is None or now >= window[1]:
            self._windows[key] = [1, now + self.window_seconds]
            return RateLimitStatus(
                allowed=True,
                limit=self.max_requests,
                remaining=self.max_requests - 1,
                reset_in=self.window_seconds,
            )

        reset_in = max(0, math.ceil(window[1] - now))
        if window[0] >= self.max_requests:
            logger.warning("Rate limit exceeded for %s", key)
            return RateLimitStatus(allowed=False, limit=self.max_requests, remaining=0, reset_in=reset_in)

        window[0] += 1
        return RateLimitStatus(
            allowed=True,
            limit=self.max_requests,
            remaining=self.max_requests - window[0],
            reset_in=reset_in,
        )

    def cleanup(self, now: float = None) -> int:
        now = self._clock() if now is None else now
        stale = [key for key, (_, reset_at) in self._windows.items() if now >= reset_at]
        for key in stale:
            del self._windows[key]
        return len(stale)

    def reset(self) -> None:
        self._windows.clear()


quick_estimate_limiter = FixedWindowRateLimiter()
