"""RSS feed and sitemap routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response

from blog.application.usecase.feed import (
    BuildFeedRequest,
    BuildFeedUseCase,
    BuildSitemapRequest,
    BuildSitemapUseCase,
)
from blog.interface.api.errors import internal_error
from blog.interface.api.guard import RequestGuard

router = APIRouter(tags=["feed"], route_class=DishkaRoute)

CACHE_CONTROL = "public, max-age=3600"


@router.get("/feed", response_class=Response)
async def feed(
    request: Request,
    guard: FromDishka[RequestGuard],
    build_feed_use_case: FromDishka[BuildFeedUseCase],
) -> Response:
    """RSS 2.0 feed of the latest posts."""
    guard.check_rate_limit(request, "feed")

    try:
        document = await build_feed_use_case.execute(BuildFeedRequest())
    except Exception as e:
        raise internal_error(e, "Failed to build feed")

    return Response(
        content=document,
        media_type="application/rss+xml",
        headers={"Cache-Control": CACHE_CONTROL},
    )


@router.get("/sitemap.xml", response_class=Response)
async def sitemap(
    request: Request,
    guard: FromDishka[RequestGuard],
    build_sitemap_use_case: FromDishka[BuildSitemapUseCase],
) -> Response:
    """Sitemap of the site sections and every post."""
    guard.check_rate_limit(request, "feed")

    try:
        document = await build_sitemap_use_case.execute(BuildSitemapRequest())
    except Exception as e:
        raise internal_error(e, "Failed to build sitemap")

    return Response(
        content=document,
        media_type="application/xml",
        headers={"Cache-Control": CACHE_CONTROL},
    )
