"""Create post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.service import PostService
from blog.domain.value import PostCategory


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    category: PostCategory
    sub_category: Optional[str] = None
    excerpt: Optional[str] = None
    tags: list[str] = []
    slug: Optional[str] = None


class CreatePostResponse(CamelModel):
    """Create post response."""

    slug: str


class CreatePostUseCase(BaseUseCase):
    """Use case for composing a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Create the post, dated today.

        The slug is the one supplied, or is generated from the title.

        Raises:
            ConflictError: If the slug is already taken
        """
        with logfire.span(
            "create_post.execute",
            title=request.title,
            category=request.category.value,
        ):
            post = await self.post_service.create_post(
                title=request.title,
                content=request.content,
                category=request.category,
                sub_category=request.sub_category,
                excerpt=request.excerpt,
                tags=request.tags,
                slug=request.slug,
            )
            return CreatePostResponse(slug=post.slug)
