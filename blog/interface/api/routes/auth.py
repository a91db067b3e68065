"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from blog.application.usecase.auth import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    VerifySessionRequest,
    VerifySessionResponse,
    VerifySessionUseCase,
)
from blog.domain.error import AuthenticationError
from blog.interface.api.errors import internal_error
from blog.interface.api.guard import RequestGuard, bearer_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    password: str = Field(min_length=1)


@router.post("", response_model=LoginResponse)
async def login(
    body: LoginAPIRequest,
    request: Request,
    guard: FromDishka[RequestGuard],
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange the admin password for a 24h session token.

    Raises:
        HTTPException: 429 when rate limited, 401 for a wrong password
    """
    guard.check_rate_limit(request, "auth")

    try:
        return await login_use_case.execute(LoginRequest(password=body.password))
    except AuthenticationError as e:
        logger.warning("Failed admin login from %s", request.client)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception as e:
        raise internal_error(e, "Login failed")


@router.get("", response_model=VerifySessionResponse)
async def verify_session(
    request: Request,
    verify_session_use_case: FromDishka[VerifySessionUseCase],
) -> VerifySessionResponse | JSONResponse:
    """Check the bearer token.

    Returns:
        ``{valid: true, role}``, or 401 ``{valid: false}``
    """
    try:
        return await verify_session_use_case.execute(
            VerifySessionRequest(token=bearer_token(request))
        )
    except AuthenticationError:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"valid": False}
        )
