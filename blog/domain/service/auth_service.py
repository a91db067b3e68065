"""Admin authentication domain service."""

import logfire

from blog.config import AuthSettings
from blog.util.password import hash_password, verify_password

from .base import Service


class AuthService(Service):
    """Checks the single admin password.

    The reference is always a bcrypt hash. When only a plaintext password
    is configured it is hashed once, here, so candidates go through the
    same comparison either way.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize auth service.

        Args:
            auth_settings: Authentication settings
        """
        if auth_settings.admin_password_hash:
            self._password_hash = auth_settings.admin_password_hash
        else:
            logfire.warn(
                "No admin password hash configured, hashing plaintext fallback"
            )
            self._password_hash = hash_password(
                auth_settings.admin_password, rounds=auth_settings.bcrypt_rounds
            )

    def check_password(self, candidate: str) -> bool:
        """Check a candidate password.

        Args:
            candidate: Password supplied by the client

        Returns:
            True if it matches the admin password
        """
        with logfire.span("auth_service.check_password"):
            matched = verify_password(candidate, self._password_hash)
            if not matched:
                logfire.warn("Admin password rejected")
            return matched
