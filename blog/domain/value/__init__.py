"""Domain value objects for the blog."""

from blog.domain.value.types import (
    DEFAULT_SUB_CATEGORY,
    PostCategory,
    RateLimitDecision,
    RateLimitRecord,
    TokenClaims,
    split_sub_category,
)

__all__ = [
    "DEFAULT_SUB_CATEGORY",
    "PostCategory",
    "RateLimitDecision",
    "RateLimitRecord",
    "TokenClaims",
    "split_sub_category",
]
