"""Delete post use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService


class DeletePostRequest(BaseModel):
    """Delete post request."""

    slug: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool = True


class DeletePostUseCase(BaseUseCase):
    """Use case for removing a post file."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete the post.

        Raises:
            NotFoundError: If the post does not exist
        """
        await self.post_service.delete_post(request.slug)
        return DeletePostResponse()
