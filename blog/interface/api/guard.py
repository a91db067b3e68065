"""Request guards: rate limiting and bearer-token authentication."""

import logging

from fastapi import HTTPException, Request, status

from blog.application.usecase.auth import (
    VerifySessionRequest,
    VerifySessionResponse,
    VerifySessionUseCase,
)
from blog.config import RateLimitSettings
from blog.domain.error import AuthenticationError
from blog.domain.service import RateLimitService

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"


def client_ip(request: Request) -> str:
    """Best-effort client identity for rate limiting.

    First entry of X-Forwarded-For, then X-Real-IP, then the socket peer.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


def bearer_token(request: Request) -> str | None:
    """Token from an ``Authorization: Bearer <token>`` header."""
    header = request.headers.get("authorization")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class RequestGuard:
    """Checks run by handlers before their use case.

    Rate limiting comes first so that failed logins and bad tokens are
    counted too.
    """

    def __init__(
        self,
        rate_limiter: RateLimitService,
        rate_limit_settings: RateLimitSettings,
        verify_session: VerifySessionUseCase,
    ) -> None:
        self.rate_limiter = rate_limiter
        self.rate_limit_settings = rate_limit_settings
        self.verify_session = verify_session

    def check_rate_limit(self, request: Request, action: str) -> None:
        """Count the request against ``<action>:<client>``.

        Raises:
            HTTPException: 429 with Retry-After when the window is exhausted
        """
        if not self.rate_limit_settings.enabled:
            return

        policy = self.rate_limit_settings.policy_for(action)
        key = f"{action}:{client_ip(request)}"
        decision = self.rate_limiter.check_and_consume(
            key, policy.max_requests, policy.window_ms
        )
        if not decision.allowed:
            logger.warning("Rate limit exceeded for %s", key)
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Too many requests, please retry later",
                headers={"Retry-After": str(decision.retry_after_seconds)},
            )

    async def require_admin(self, request: Request) -> VerifySessionResponse:
        """Require a valid admin bearer token.

        Raises:
            HTTPException: 401 if the token is missing, invalid or expired
        """
        try:
            return await self.verify_session.execute(
                VerifySessionRequest(token=bearer_token(request))
            )
        except AuthenticationError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(e),
                headers={"WWW-Authenticate": "Bearer"},
            )
