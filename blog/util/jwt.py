"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Literal

import jwt
from pydantic import BaseModel

from blog.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    role: Literal["admin"]
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(role: str, issued_at: datetime, settings: AuthSettings) -> str:
    """Create a signed JWT token.

    Args:
        role: Role asserted by the token
        issued_at: Issue time (timezone-aware)
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = issued_at + timedelta(hours=settings.token_expiry_hours)

    payload = {
        "role": role,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, now: datetime, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Expiry is checked against ``now`` rather than the wall clock so callers
    can supply their own time source.

    Args:
        token: JWT token to verify
        now: Current time (timezone-aware)
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is malformed, forged or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={
                "require": ["exp", "iat"],
                "verify_exp": False,
                "verify_iat": False,
            },
        )
        decoded = TokenPayload(**payload)
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        # Well-signed but with claims we do not understand
        raise JWTError("Invalid token claims")

    if now >= decoded.exp.astimezone(timezone.utc):
        raise JWTError("Token has expired")

    return decoded
