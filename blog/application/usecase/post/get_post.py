"""Get post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.error import NotFoundError
from blog.domain.model.post import reading_time
from blog.domain.service import PostService
from blog.domain.value import PostCategory


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str


class GetPostResponse(CamelModel):
    """Full post, with the raw Markdown body."""

    slug: str
    title: str
    date: str
    excerpt: str
    tags: list[str]
    category: PostCategory
    sub_category: Optional[str] = None
    cover_image: Optional[str] = None
    content: str
    reading_time: int


class GetPostUseCase(BaseUseCase):
    """Use case for reading one post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Load a post.

        Raises:
            NotFoundError: If no post has this slug
        """
        with logfire.span("get_post.execute", slug=request.slug):
            post = await self.post_service.get_post(request.slug)
            if post is None:
                raise NotFoundError("Post", request.slug)

            return GetPostResponse(
                **post.model_dump(),
                reading_time=reading_time(post.content),
            )
