"""List posts use case."""

from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.model.post import PostMeta
from blog.domain.service import PostService
from blog.domain.value import PostCategory


class PostListItem(CamelModel):
    """Post list item in response."""

    slug: str
    title: str
    date: str
    excerpt: str
    tags: list[str]
    category: PostCategory
    sub_category: Optional[str] = None
    cover_image: Optional[str] = None
    reading_time: int

    @classmethod
    def from_meta(cls, meta: PostMeta) -> "PostListItem":
        return cls.model_validate(meta.model_dump())


class ListPostsRequest(BaseModel):
    """List posts request."""

    category: Optional[PostCategory] = None
    sub_category: Optional[str] = None
    tag: Optional[str] = None
    q: Optional[str] = None


class ListPostsResponse(CamelModel):
    """List posts response."""

    posts: list[PostListItem]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts with optional filters."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """List posts newest first."""
        posts = await self.post_service.list_posts(
            category=request.category,
            sub_category=request.sub_category,
            tag=request.tag,
            query=request.q,
        )
        return ListPostsResponse(posts=[PostListItem.from_meta(p) for p in posts])
