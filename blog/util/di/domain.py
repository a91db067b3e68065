"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings
from blog.domain.repository import CategoryRepository, PostRepository, RateLimitStore
from blog.domain.service import (
    AuthService,
    CategoryService,
    PostService,
    RateLimitService,
    TokenService,
)
from blog.util.clock import Clock
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are APP-scoped: the write locks in PostService and
    CategoryService only serialize writes if every request shares them.
    """

    scope = Scope.APP

    @provide
    def get_auth_service(self, auth_settings: AuthSettings) -> AuthService:
        """Provide admin password check (hashes the fallback password once)."""
        return AuthService(auth_settings=auth_settings)

    @provide
    def get_token_service(
        self, auth_settings: AuthSettings, clock: Clock
    ) -> TokenService:
        """Provide session token domain service."""
        return TokenService(auth_settings=auth_settings, clock=clock)

    @provide
    def get_rate_limit_service(
        self, store: RateLimitStore, clock: Clock
    ) -> RateLimitService:
        """Provide rate limiter."""
        return RateLimitService(store=store, clock=clock)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, clock: Clock
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, clock=clock)

    @provide
    def get_category_service(
        self,
        category_repository: CategoryRepository,
        post_repository: PostRepository,
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(
            category_repository=category_repository,
            post_repository=post_repository,
        )
