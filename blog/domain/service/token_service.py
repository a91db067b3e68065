"""Session token domain service."""

import logfire

from blog.config import AuthSettings
from blog.domain.value import TokenClaims
from blog.util.clock import Clock
from blog.util.jwt import JWTError, create_token, verify_token

from .base import Service


class TokenService(Service):
    """Issues and verifies admin session tokens."""

    def __init__(self, auth_settings: AuthSettings, clock: Clock) -> None:
        """Initialize token service.

        Args:
            auth_settings: Authentication settings
            clock: Time source used for issue and expiry times
        """
        self.auth_settings = auth_settings
        self.clock = clock

    @property
    def expires_in(self) -> str:
        """Token lifetime as shown to clients, e.g. ``24h``."""
        return f"{self.auth_settings.token_expiry_hours}h"

    def issue_token(self, claims: TokenClaims | None = None) -> str:
        """Sign a token for the given claims.

        Issue and expiry times are always taken from the clock.

        Args:
            claims: Claims to sign (defaults to an admin session)

        Returns:
            JWT token string
        """
        claims = claims or TokenClaims()
        with logfire.span("token_service.issue_token", role=claims.role):
            token = create_token(claims.role, self.clock.now(), self.auth_settings)
            logfire.info("Session token issued", role=claims.role)
            return token

    def verify_token(self, token: str | None) -> TokenClaims | None:
        """Verify a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Claims if the token is well-formed, correctly signed and not
            expired; None otherwise
        """
        if not token:
            return None

        with logfire.span("token_service.verify_token"):
            try:
                payload = verify_token(token, self.clock.now(), self.auth_settings)
            except JWTError as e:
                logfire.debug("Token rejected", error=str(e))
                return None

            return TokenClaims(
                role=payload.role,
                issued_at=payload.iat,
                expires_at=payload.exp,
            )
