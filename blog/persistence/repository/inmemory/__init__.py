"""In-memory repository implementations for testing."""

from .category import InMemoryCategoryRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryPostRepository",
]
