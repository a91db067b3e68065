"""Interface layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import VerifySessionUseCase
from blog.config import RateLimitSettings
from blog.domain.service import RateLimitService
from blog.interface.api.guard import RequestGuard
from blog.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """Request guards used by the HTTP handlers."""

    @provide(scope=Scope.REQUEST)
    def get_request_guard(
        self,
        rate_limiter: RateLimitService,
        rate_limit_settings: RateLimitSettings,
        verify_session: VerifySessionUseCase,
    ) -> RequestGuard:
        """Provide request guard."""
        return RequestGuard(
            rate_limiter=rate_limiter,
            rate_limit_settings=rate_limit_settings,
            verify_session=verify_session,
        )
