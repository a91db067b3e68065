"""File-system repository implementations."""

from blog.persistence.repository.category import JsonCategoryRepository
from blog.persistence.repository.post import FileSystemPostRepository
from blog.persistence.repository.rate_limit import InMemoryRateLimitStore

__all__ = [
    "FileSystemPostRepository",
    "InMemoryRateLimitStore",
    "JsonCategoryRepository",
]
