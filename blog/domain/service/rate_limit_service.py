"""Fixed-window rate limiter."""

import logfire

from blog.domain.repository import RateLimitStore
from blog.domain.value import RateLimitDecision, RateLimitRecord
from blog.util.clock import Clock

from .base import Service


class RateLimitService(Service):
    """Counts requests per key inside fixed windows.

    A check reads and writes the store without awaiting, so on a single
    event loop it cannot interleave with another check for the same key.
    """

    def __init__(self, store: RateLimitStore, clock: Clock) -> None:
        """Initialize rate limit service.

        Args:
            store: Record storage, shared process-wide
            clock: Time source for windows
        """
        self.store = store
        self.clock = clock

    def check_and_consume(
        self, key: str, max_requests: int, window_ms: int
    ) -> RateLimitDecision:
        """Count one request against a key.

        Args:
            key: Logical key, usually ``<action>:<client>``
            max_requests: Requests allowed per window
            window_ms: Window length in milliseconds

        Returns:
            Whether the request is allowed, the slots left and the time
            until the window resets
        """
        now = self.clock.now_ms()
        record = self.store.get(key)

        if record is None or now > record.reset_at_ms:
            if record is not None:
                self.store.delete(key)
            self.store.set(key, RateLimitRecord(count=1, reset_at_ms=now + window_ms))
            return RateLimitDecision(
                allowed=True, remaining=max_requests - 1, reset_in_ms=window_ms
            )

        if record.count >= max_requests:
            logfire.warn("Rate limit exceeded", key=key, max_requests=max_requests)
            return RateLimitDecision(
                allowed=False, remaining=0, reset_in_ms=record.reset_at_ms - now
            )

        updated = RateLimitRecord(
            count=record.count + 1, reset_at_ms=record.reset_at_ms
        )
        self.store.set(key, updated)
        return RateLimitDecision(
            allowed=True,
            remaining=max_requests - updated.count,
            reset_in_ms=record.reset_at_ms - now,
        )
