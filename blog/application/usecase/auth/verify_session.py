"""Verify session use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.error import AuthenticationError
from blog.domain.service import TokenService


class VerifySessionRequest(BaseModel):
    """Verify session request."""

    token: str | None = None


class VerifySessionResponse(BaseModel):
    """Verify session response."""

    valid: bool
    role: str


class VerifySessionUseCase(BaseUseCase):
    """Check a bearer token."""

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    async def execute(self, request: VerifySessionRequest) -> VerifySessionResponse:
        """Verify the token.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired,
                or does not carry the admin role
        """
        claims = self.token_service.verify_token(request.token)
        if claims is None or claims.role != "admin":
            raise AuthenticationError("Invalid or expired token")
        return VerifySessionResponse(valid=True, role=claims.role)
