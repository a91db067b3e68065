"""Update post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.model.post import PostPatch
from blog.domain.service import PostService
from blog.domain.value import PostCategory


class UpdatePostRequest(BaseModel):
    """Update post request; unset fields keep their current values."""

    slug: str
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    tags: Optional[list[str]] = None
    category: Optional[PostCategory] = None
    sub_category: Optional[str] = None


class UpdatePostResponse(CamelModel):
    """Update post response."""

    slug: str
    category: PostCategory
    sub_category: Optional[str] = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post, moving it when its category changes."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Apply the update.

        Raises:
            NotFoundError: If the post does not exist
            PostRelocationError: If a moved post's old file could not be removed
        """
        with logfire.span("update_post.execute", slug=request.slug):
            patch = PostPatch(
                title=request.title,
                content=request.content,
                excerpt=request.excerpt,
                tags=request.tags,
                category=request.category,
                sub_category=request.sub_category,
            )
            post = await self.post_service.update_post(request.slug, patch)
            return UpdatePostResponse(
                slug=post.slug,
                category=post.category,
                sub_category=post.sub_category,
            )
