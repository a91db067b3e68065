"""Domain model entities for the blog."""

from blog.domain.model.category import (
    DEFAULT_SUB_CATEGORIES,
    PROTECTED_SUB_CATEGORIES,
    SubCategory,
)
from blog.domain.model.post import Post, PostMeta, PostPatch

__all__ = [
    "DEFAULT_SUB_CATEGORIES",
    "PROTECTED_SUB_CATEGORIES",
    "Post",
    "PostMeta",
    "PostPatch",
    "SubCategory",
]
