"""Time sources.

Services take a Clock instead of calling datetime.now() so that expiry and
rate-limit windows can be exercised deterministically in tests.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timezone


class Clock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        pass

    def now_ms(self) -> int:
        """Return the current time in epoch milliseconds."""
        return int(self.now().timestamp() * 1000)

    def today(self) -> date:
        """Return the current UTC calendar date."""
        return self.now().date()


class SystemClock(Clock):
    """Wall-clock time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
