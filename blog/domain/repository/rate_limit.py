"""Rate limit store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.value import RateLimitRecord


class RateLimitStore(ABC):
    """Key-value storage for rate limit records.

    Methods are synchronous so that a check-and-consume runs without
    yielding to the event loop between the read and the write.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[RateLimitRecord]:
        pass

    @abstractmethod
    def set(self, key: str, record: RateLimitRecord) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass
