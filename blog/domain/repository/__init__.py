"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.category import CategoryRepository
from blog.domain.repository.post import PostRepository, relative_directory
from blog.domain.repository.rate_limit import RateLimitStore

__all__ = [
    "CategoryRepository",
    "PostRepository",
    "RateLimitStore",
    "relative_directory",
]
