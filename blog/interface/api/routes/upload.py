"""Markdown upload route."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Request, UploadFile, status

from blog.application.usecase.post import (
    UploadPostRequest,
    UploadPostResponse,
    UploadPostUseCase,
)
from blog.config import ContentSettings
from blog.domain.error import DomainError
from blog.interface.api.errors import internal_error, to_http_exception
from blog.interface.api.guard import RequestGuard

router = APIRouter(prefix="/upload", tags=["upload"], route_class=DishkaRoute)


@router.post("", response_model=UploadPostResponse, status_code=status.HTTP_201_CREATED)
async def upload_post(
    request: Request,
    guard: FromDishka[RequestGuard],
    upload_post_use_case: FromDishka[UploadPostUseCase],
    content_settings: FromDishka[ContentSettings],
    file: UploadFile = File(...),
    category: Optional[str] = Form(default=None),
    sub_category: Optional[str] = Form(default=None, alias="subCategory"),
    tags: Optional[str] = Form(default=None),
) -> UploadPostResponse:
    """Publish an uploaded .md file. Requires authentication.

    Args:
        file: Markdown file (at most 5MB)
        category: tech, life or tools
        sub_category: Tech sub-category
        tags: Comma-separated tags; overrides frontmatter and automatic tags

    Raises:
        HTTPException: 400 for a non-.md, oversized or miscategorized file,
            401, 409 if the slug is taken, 429
    """
    guard.check_rate_limit(request, "upload")
    await guard.require_admin(request)

    try:
        # One byte past the limit is enough to reject
        data = await file.read(content_settings.max_upload_bytes + 1)
        return await upload_post_use_case.execute(
            UploadPostRequest(
                filename=file.filename or "",
                data=data,
                category=category,
                sub_category=sub_category,
                tags=tags,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to upload post")
    except Exception as e:
        raise internal_error(e, "Failed to upload post")
