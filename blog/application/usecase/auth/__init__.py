"""Authentication use cases."""

from .login import LoginRequest, LoginResponse, LoginUseCase
from .verify_session import (
    VerifySessionRequest,
    VerifySessionResponse,
    VerifySessionUseCase,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "VerifySessionRequest",
    "VerifySessionResponse",
    "VerifySessionUseCase",
]
