"""Post repository interface."""

from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Iterable, Optional

from blog.domain.model.category import SubCategory
from blog.domain.model.post import Post, PostMeta, PostPatch
from blog.domain.value import DEFAULT_SUB_CATEGORY, PostCategory, split_sub_category


def relative_directory(category: PostCategory, sub_category: Optional[str]) -> PurePath:
    """Directory of a post relative to the content root.

    Tech posts live under ``tech/<sub_category>`` (``other`` when unset);
    life and tools posts directly under their category.

    Raises:
        ValueError: If the sub-category is not a valid path
    """
    if category is PostCategory.TECH:
        segments = split_sub_category(sub_category or DEFAULT_SUB_CATEGORY)
        return PurePath(category.value, *segments)
    return PurePath(category.value)


class PostRepository(ABC):
    """Repository for Post aggregate.

    The repository is the only writer of post files. Slugs are unique
    across the whole repository.
    """

    @abstractmethod
    def resolve_directory(
        self, category: PostCategory, sub_category: Optional[str]
    ) -> PurePath:
        """Directory holding posts of a category.

        Raises:
            ContentPathError: If the directory would not be a valid location
        """
        pass

    @abstractmethod
    async def reindex(self) -> None:
        """Rebuild the slug index from storage."""
        pass

    @abstractmethod
    async def locate(self, slug: str) -> Optional[PurePath]:
        """Find the file holding a post.

        Tries the slug as given, then its URL-decoded form.

        Args:
            slug: Post slug

        Returns:
            Path of the post file, None if not found
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Post]:
        """Find a post, including its raw Markdown content.

        Args:
            slug: Post slug (may be URL-encoded)

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[PostMeta]:
        """List metadata for every post.

        Returns:
            Posts sorted by date descending; ties keep scan order
        """
        pass

    @abstractmethod
    async def create(self, post: Post) -> PurePath:
        """Write a new post.

        Args:
            post: The post to write

        Returns:
            Path of the written file

        Raises:
            ConflictError: If the slug is already taken
        """
        pass

    @abstractmethod
    async def update(self, slug: str, patch: PostPatch) -> Post:
        """Merge a patch into an existing post and rewrite it.

        Moves the file when the category or sub-category changes.

        Args:
            slug: Post slug
            patch: Fields to change

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
            PostRelocationError: If the old file could not be removed after a move
        """
        pass

    @abstractmethod
    async def delete(self, slug: str) -> None:
        """Remove a post file (hard delete).

        Raises:
            NotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    async def count_posts(
        self, category: PostCategory, sub_category: Optional[str]
    ) -> int:
        """Count posts stored under a category directory, nested levels included."""
        pass

    @abstractmethod
    async def ensure_directories(self, sub_categories: Iterable[SubCategory]) -> None:
        """Create category directories for the given sub-category tree."""
        pass

    @abstractmethod
    async def remove_directory(self, category: PostCategory, sub_category: str) -> None:
        """Remove an (empty of posts) sub-category directory if it exists."""
        pass
