"""Admin login use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.error import AuthenticationError
from blog.domain.service import AuthService, TokenService


class LoginRequest(BaseModel):
    """Login request."""

    password: str


class LoginResponse(CamelModel):
    """Login response."""

    token: str
    expires_in: str


class LoginUseCase(BaseUseCase):
    """Exchange the admin password for a session token."""

    def __init__(self, auth_service: AuthService, token_service: TokenService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Password check
            token_service: Token issuance
        """
        self.auth_service = auth_service
        self.token_service = token_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check the password and issue a token.

        Raises:
            AuthenticationError: If the password is wrong
        """
        with logfire.span("login.execute"):
            if not self.auth_service.check_password(request.password):
                raise AuthenticationError("Wrong password")

            token = self.token_service.issue_token()
            return LoginResponse(token=token, expires_in=self.token_service.expires_in)
