"""Post routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from blog.domain.error import DomainError
from blog.domain.value import PostCategory, split_sub_category
from blog.interface.api.errors import internal_error, to_http_exception
from blog.interface.api.guard import RequestGuard

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


def _check_sub_category(value: Optional[str]) -> Optional[str]:
    if value:
        split_sub_category(value)
    return value or None


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = Field(default=None, max_length=500)
    tags: list[str] = Field(default_factory=list, max_length=10)
    category: PostCategory
    sub_category: Optional[str] = None
    slug: Optional[str] = Field(default=None, pattern=r"^[a-z0-9-]+$")

    validate_sub_category = field_validator("sub_category")(_check_sub_category)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post; omitted fields are left unchanged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = Field(default=None, max_length=500)
    tags: Optional[list[str]] = Field(default=None, max_length=10)
    category: Optional[PostCategory] = None
    sub_category: Optional[str] = None

    validate_sub_category = field_validator("sub_category")(_check_sub_category)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    request: Request,
    guard: FromDishka[RequestGuard],
    list_posts_use_case: FromDishka[ListPostsUseCase],
    category: Optional[PostCategory] = None,
    sub_category: Optional[str] = Query(default=None, alias="subCategory"),
    tag: Optional[str] = None,
    q: Optional[str] = None,
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        category: Only this top-level category
        sub_category: Only this tech sub-category (children included)
        tag: Only posts with this tag
        q: Case-insensitive search in title, excerpt and tags
    """
    guard.check_rate_limit(request, "posts:get")

    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(category=category, sub_category=sub_category, tag=tag, q=q)
        )
    except Exception as e:
        raise internal_error(e, "Failed to list posts")


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: CreatePostAPIRequest,
    request: Request,
    guard: FromDishka[RequestGuard],
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a post. Requires authentication.

    Raises:
        HTTPException: 401, 409 if the slug is taken, 429
    """
    guard.check_rate_limit(request, "posts:create")
    await guard.require_admin(request)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(**body.model_dump())
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to create post")
    except Exception as e:
        raise internal_error(e, "Failed to create post")


@router.get("/{slug}", response_model=GetPostResponse)
async def get_post(
    slug: str,
    request: Request,
    guard: FromDishka[RequestGuard],
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get one post with its raw Markdown content.

    Raises:
        HTTPException: 404 if not found
    """
    guard.check_rate_limit(request, "post:get")

    try:
        return await get_post_use_case.execute(GetPostRequest(slug=slug))
    except DomainError as e:
        raise to_http_exception(e, "Failed to get post")
    except Exception as e:
        raise internal_error(e, "Failed to get post")


@router.put("/{slug}", response_model=UpdatePostResponse)
async def update_post(
    slug: str,
    body: UpdatePostAPIRequest,
    request: Request,
    guard: FromDishka[RequestGuard],
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Update a post; changing its category moves the file. Requires authentication.

    Raises:
        HTTPException: 401, 404, 429; 500 if a move left the old file behind
    """
    guard.check_rate_limit(request, "post:update")
    await guard.require_admin(request)

    try:
        result = await update_post_use_case.execute(
            UpdatePostRequest(slug=slug, **body.model_dump(exclude_none=True))
        )
        logfire.info("Post updated via API", slug=result.slug)
        return result
    except DomainError as e:
        raise to_http_exception(e, "Failed to update post")
    except Exception as e:
        raise internal_error(e, "Failed to update post")


@router.delete("/{slug}", response_model=DeletePostResponse)
async def delete_post(
    slug: str,
    request: Request,
    guard: FromDishka[RequestGuard],
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Delete a post file. Requires authentication.

    Raises:
        HTTPException: 401, 404, 429
    """
    guard.check_rate_limit(request, "post:delete")
    await guard.require_admin(request)

    try:
        return await delete_post_use_case.execute(DeletePostRequest(slug=slug))
    except DomainError as e:
        raise to_http_exception(e, "Failed to delete post")
    except Exception as e:
        raise internal_error(e, "Failed to delete post")

