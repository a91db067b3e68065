"""In-memory post repository for testing."""

from pathlib import PurePath
from typing import Iterable, Optional
from urllib.parse import unquote

from blog.domain.error import ConflictError, ContentPathError, NotFoundError
from blog.domain.model.category import SubCategory
from blog.domain.model.post import Post, PostMeta, PostPatch
from blog.domain.repository import PostRepository, relative_directory
from blog.domain.value import PostCategory


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Paths are relative to an imaginary content root.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._posts: dict[str, tuple[PurePath, Post]] = {}
        self.directories: set[PurePath] = set()

    def resolve_directory(
        self, category: PostCategory, sub_category: Optional[str]
    ) -> PurePath:
        try:
            return relative_directory(category, sub_category)
        except ValueError as e:
            raise ContentPathError(str(e)) from e

    async def reindex(self) -> None:
        """Nothing to rebuild."""
        pass

    async def locate(self, slug: str) -> Optional[PurePath]:
        """Find the stored path of a post."""
        key = self._key(slug)
        return self._posts[key][0] if key else None

    async def find_by_slug(self, slug: str) -> Optional[Post]:
        """Find a post by slug or its URL-decoded form."""
        key = self._key(slug)
        return self._posts[key][1] if key else None

    async def find_all(self) -> list[PostMeta]:
        """List posts newest first, insertion order for equal dates."""
        metas = [post.meta() for _, post in self._posts.values()]
        return sorted(metas, key=lambda meta: meta.date, reverse=True)

    async def create(self, post: Post) -> PurePath:
        """Store a new post."""
        if post.slug in self._posts:
            raise ConflictError("Post", post.slug)
        directory = self.resolve_directory(post.category, post.sub_category)
        path = directory / f"{post.slug}.md"
        self.directories.add(directory)
        self._posts[post.slug] = (path, post)
        return path

    async def update(self, slug: str, patch: PostPatch) -> Post:
        """Merge a patch and move the post to its new directory."""
        key = self._key(slug)
        if key is None:
            raise NotFoundError("Post", slug)

        _, current = self._posts[key]
        updated = current.apply(patch)
        directory = self.resolve_directory(updated.category, updated.sub_category)
        self.directories.add(directory)
        self._posts[key] = (directory / f"{key}.md", updated)
        return updated

    async def delete(self, slug: str) -> None:
        """Remove a post."""
        key = self._key(slug)
        if key is None:
            raise NotFoundError("Post", slug)
        del self._posts[key]

    async def count_posts(
        self, category: PostCategory, sub_category: Optional[str]
    ) -> int:
        """Count posts stored at or below a directory."""
        directory = self.resolve_directory(category, sub_category)
        return sum(
            1 for path, _ in self._posts.values() if path.is_relative_to(directory)
        )

    async def ensure_directories(self, sub_categories: Iterable[SubCategory]) -> None:
        """Record the directories a file-system repository would create."""
        self.directories.add(PurePath(PostCategory.LIFE.value))
        self.directories.add(PurePath(PostCategory.TOOLS.value))
        for entry in sub_categories:
            self.directories.add(self.resolve_directory(PostCategory.TECH, entry.value))
            for child in entry.children:
                self.directories.add(
                    self.resolve_directory(
                        PostCategory.TECH, f"{entry.value}/{child.value}"
                    )
                )

    async def remove_directory(self, category: PostCategory, sub_category: str) -> None:
        """Forget a directory and everything recorded below it."""
        directory = self.resolve_directory(category, sub_category)
        self.directories = {
            d for d in self.directories if not d.is_relative_to(directory)
        }

    def _key(self, slug: str) -> Optional[str]:
        for candidate in (slug, unquote(slug)):
            if candidate in self._posts:
                return candidate
        return None
