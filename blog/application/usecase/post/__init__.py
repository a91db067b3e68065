"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostListItem,
)
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase
from .upload_post import UploadPostRequest, UploadPostResponse, UploadPostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostListItem",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
    "UploadPostRequest",
    "UploadPostResponse",
    "UploadPostUseCase",
]
