"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from blog.config import API_VERSION, Settings
from blog.util.clock import Clock

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    content_root: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], clock: FromDishka[Clock]
) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=clock.now(),
        version=API_VERSION,
        git_sha=settings.git_sha,
        content_root=str(settings.content.root),
    )
