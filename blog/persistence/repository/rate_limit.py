"""In-memory rate limit store."""

from typing import Optional

from blog.domain.repository import RateLimitStore
from blog.domain.value import RateLimitRecord


class InMemoryRateLimitStore(RateLimitStore):
    """Process-wide dictionary of rate limit records; lost on restart."""

    def __init__(self) -> None:
        self._records: dict[str, RateLimitRecord] = {}

    def get(self, key: str) -> Optional[RateLimitRecord]:
        return self._records.get(key)

    def set(self, key: str, record: RateLimitRecord) -> None:
        self._records[key] = record

    def delete(self, key: str) -> None:
        self._records.pop(key, None)

    def __len__(self) -> int:
        return len(self._records)
