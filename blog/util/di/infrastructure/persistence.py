"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from blog.config import ContentSettings
from blog.domain.repository import CategoryRepository, PostRepository, RateLimitStore
from blog.persistence.repository import (
    FileSystemPostRepository,
    InMemoryRateLimitStore,
    JsonCategoryRepository,
)
from blog.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the content directory.

    Repositories are APP-scoped: the post repository owns the slug index
    and the rate limit store must be shared by every request.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_post_repository(self, content_settings: ContentSettings) -> PostRepository:
        """Provide Post repository."""
        logfire.info("Using content root", root=str(content_settings.root))
        return FileSystemPostRepository(content_settings.root)

    @provide
    def get_category_repository(
        self, content_settings: ContentSettings
    ) -> CategoryRepository:
        """Provide Category repository."""
        return JsonCategoryRepository(content_settings.root)

    @provide
    def get_rate_limit_store(self) -> RateLimitStore:
        """Provide process-wide rate limit store."""
        return InMemoryRateLimitStore()
