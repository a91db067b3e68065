"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from blog.config import (
    AuthSettings,
    ContentSettings,
    RateLimitSettings,
    Settings,
    SiteSettings,
)
from blog.util.clock import Clock, SystemClock
from blog.util.di.base import ProviderBase
from blog.util.error import ConfigurationError

DEFAULT_JWT_SECRET = AuthSettings().jwt_secret


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the default JWT secret
        """
        settings = Settings()
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError(
                "AUTH__JWT_SECRET", "the default secret is not allowed in production"
            )
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Provide content settings."""
        return settings.content

    @provide(scope=Scope.APP)
    def provide_site_settings(self, settings: Settings) -> SiteSettings:
        """Provide site settings."""
        return settings.site

    @provide(scope=Scope.APP)
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        """Provide rate limit settings."""
        return settings.rate_limit

    @provide(scope=Scope.APP)
    def provide_clock(self) -> Clock:
        """Provide wall-clock time."""
        return SystemClock()
