"""
Rate limiter for outbound API requests.
Token bucket shared by every request a client makes, including concurrent ones.
"""

import asyncio
import time
from typing import Optional

class RateLimiter:
    """Token bucket rate limiter for API requests."""

    def __init__(self, requests_per_minute: int, burst_size: Optional[int] = None):
        """
        Initialize rate limiter.

        Args:
            requests_per_minute: Sustained request rate; 0 or less disables limiting
            burst_size: Maximum burst size (defaults to requests_per_minute)
        """
        self.requests_per_minute = requests_per_minute
        self.burst_size = burst_size or max(requests_per_minute, 1)
        self.tokens = float(self.burst_size)
        self.last_update = time.monotonic()
        self.lock = asyncio.Lock()

    @property
    def enabled(self) -> bool:
        return self.requests_per_minute > 0

    def _refill(self, now: float) -> float:
        elapsed = now - self.last_update
        return min(self.burst_size, self.tokens + elapsed * (self.requests_per_minute / 60.0))

    async def acquire(self) -> None:
        """Take one token, sleeping until one is available."""
        if not self.enabled:
            return

        async with self.lock:
            now = time.monotonic()
            self.tokens = self._refill(now)
            self.last_update = now

            if self.tokens >= 1:
                self.tokens -= 1
                return

            wait_time = (1 - self.tokens) * (60.0 / self.requests_per_minute)
            await asyncio.sleep(wait_time)
            self.tokens = 0.0
            self.last_update = time.monotonic()

    def available_tokens(self) -> float:
        """Get number of available tokens."""
        if not self.enabled:
            return float(self.burst_size)
        return self._refill(time.monotonic())
