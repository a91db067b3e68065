"""Feed and sitemap use cases."""

from .build_feed import BuildFeedRequest, BuildFeedUseCase
from .build_sitemap import BuildSitemapRequest, BuildSitemapUseCase

__all__ = [
    "BuildFeedRequest",
    "BuildFeedUseCase",
    "BuildSitemapRequest",
    "BuildSitemapUseCase",
]
