"""Unit tests for LoginUseCase and VerifySessionUseCase."""

from dishka import AsyncContainer
import pytest

from blog.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    VerifySessionRequest,
    VerifySessionUseCase,
)
from blog.config import AuthSettings
from blog.domain.error import AuthenticationError
from blog.domain.service import AuthService, TokenService
from blog.util.password import hash_password
from tests.conftest import FakeClock
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_with_configured_password(self, unit_env: AsyncContainer):
        """The configured password should yield a token valid for 24h."""
        # Arrange
        login = await unit_env.get(LoginUseCase)
        token_service = await unit_env.get(TokenService)

        # Act
        response = await login.execute(LoginRequest(password="admin123"))

        # Assert
        assert response.expires_in == "24h"
        assert token_service.verify_token(response.token) is not None

    @pytest.mark.asyncio
    async def test_login_with_wrong_password_fails(self, unit_env: AsyncContainer):
        """A wrong password should raise AuthenticationError."""
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(password="wrong"))

    @pytest.mark.asyncio
    async def test_login_with_password_hash(self):
        """A configured bcrypt hash should take precedence over the plaintext."""
        # Arrange
        settings = AuthSettings(
            jwt_secret="test-secret",
            admin_password_hash=hash_password("s3cret", rounds=4),
            admin_password="admin123",
        )
        login = LoginUseCase(
            auth_service=AuthService(settings),
            token_service=TokenService(settings, FakeClock()),
        )

        # Act
        response = await login.execute(LoginRequest(password="s3cret"))

        # Assert
        assert response.token
        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(password="admin123"))


class TestVerifySessionUseCase:
    """Tests for VerifySessionUseCase."""

    @pytest.mark.asyncio
    async def test_valid_token(self):
        """An issued token should verify as an admin session."""
        # Arrange
        token_service = TokenService(AuthSettings(jwt_secret="s"), FakeClock())
        verify = VerifySessionUseCase(token_service=token_service)

        # Act
        response = await verify.execute(
            VerifySessionRequest(token=token_service.issue_token())
        )

        # Assert
        assert response.valid is True
        assert response.role == "admin"

    @pytest.mark.asyncio
    async def test_expired_token(self):
        """An expired token should raise AuthenticationError."""
        # Arrange
        clock = FakeClock()
        token_service = TokenService(AuthSettings(jwt_secret="s"), clock)
        verify = VerifySessionUseCase(token_service=token_service)
        token = token_service.issue_token()
        clock.advance(days=2)

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await verify.execute(VerifySessionRequest(token=token))

    @pytest.mark.asyncio
    async def test_missing_token(self):
        """No token should raise AuthenticationError."""
        token_service = TokenService(AuthSettings(jwt_secret="s"), FakeClock())
        verify = VerifySessionUseCase(token_service=token_service)

        with pytest.raises(AuthenticationError):
            await verify.execute(VerifySessionRequest(token=None))
