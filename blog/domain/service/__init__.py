"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .category_service import CategoryService
from .post_service import PostService
from .rate_limit_service import RateLimitService
from .token_service import TokenService

__all__ = [
    "AuthService",
    "CategoryService",
    "PostService",
    "RateLimitService",
    "Service",
    "TokenService",
]
