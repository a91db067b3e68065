"""Post domain service."""

import asyncio
from typing import Optional

import logfire

from blog.domain.error import ValidationError
from blog.domain.model.post import MAX_TAGS, Post, PostMeta, PostPatch
from blog.domain.repository import PostRepository
from blog.domain.value import PostCategory
from blog.util.clock import Clock
from blog.util.slug import generate_slug

from .base import Service


class PostService(Service):
    """Domain service for post operations.

    All writes go through one lock, so a create cannot pass its
    existence check while another create for the same slug is in flight.
    """

    def __init__(self, post_repository: PostRepository, clock: Clock) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            clock: Time source for publication dates
        """
        self.post_repository = post_repository
        self.clock = clock
        self._write_lock = asyncio.Lock()

    async def list_posts(
        self,
        category: Optional[PostCategory] = None,
        sub_category: Optional[str] = None,
        tag: Optional[str] = None,
        query: Optional[str] = None,
    ) -> list[PostMeta]:
        """List post metadata, newest first.

        Args:
            category: Only posts in this category
            sub_category: Only posts in this sub-category or one of its children
            tag: Only posts carrying this tag
            query: Case-insensitive search over title, excerpt and tags

        Returns:
            Matching posts sorted by date descending
        """
        with logfire.span(
            "post_service.list_posts",
            category=category.value if category else None,
            sub_category=sub_category,
            tag=tag,
            query=query,
        ):
            posts = await self.post_repository.find_all()

            if category is not None:
                posts = [p for p in posts if p.category is category]
            if sub_category:
                posts = [
                    p
                    for p in posts
                    if p.sub_category == sub_category
                    or (p.sub_category or "").startswith(f"{sub_category}/")
                ]
            if tag:
                posts = [p for p in posts if tag in p.tags]
            if query:
                needle = query.lower()
                posts = [p for p in posts if _matches(p, needle)]

            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post(self, slug: str) -> Post | None:
        """Get a post by slug.

        Args:
            slug: Post slug (may be URL-encoded)

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post", slug=slug):
            post = await self.post_repository.find_by_slug(slug)

            if post:
                logfire.info("Post found", slug=post.slug, title=post.title)
            else:
                logfire.warn("Post not found", slug=slug)

            return post

    async def create_post(
        self,
        title: str,
        content: str,
        category: PostCategory,
        sub_category: Optional[str] = None,
        excerpt: Optional[str] = None,
        tags: Optional[list[str]] = None,
        slug: Optional[str] = None,
        date: Optional[str] = None,
        slug_source: Optional[str] = None,
    ) -> Post:
        """Create a post.

        Args:
            title: Post title
            content: Markdown body
            category: Top-level category
            sub_category: Tech sub-category (``other`` when omitted)
            excerpt: Summary (defaults to the title)
            tags: Tags
            slug: Explicit slug (generated when omitted)
            date: Publication date (defaults to today)
            slug_source: Text to derive the slug from instead of the title

        Returns:
            Created post

        Raises:
            ValidationError: If more than ten tags are given
            ConflictError: If the slug is already taken
        """
        _check_tags(tags)
        slug = slug or generate_slug(slug_source or title)
        post = Post(
            slug=slug,
            title=title,
            date=date or self.clock.today().isoformat(),
            excerpt=excerpt or title,
            tags=tags or [],
            category=category,
            sub_category=sub_category,
            content=content,
        )

        with logfire.span(
            "post_service.create_post",
            slug=slug,
            category=category.value,
            sub_category=post.sub_category,
        ):
            async with self._write_lock:
                path = await self.post_repository.create(post)
            logfire.info("Post created", slug=slug, path=str(path))
            return post

    async def update_post(self, slug: str, patch: PostPatch) -> Post:
        """Update a post, relocating it if its category changes.

        Args:
            slug: Post slug
            patch: Fields to change

        Returns:
            Updated post

        Raises:
            ValidationError: If the patch carries more than ten tags
            NotFoundError: If the post does not exist
            PostRelocationError: If the moved post's old file remains
        """
        _check_tags(patch.tags)
        with logfire.span(
            "post_service.update_post",
            slug=slug,
            fields=sorted(patch.model_dump(exclude_none=True)),
        ):
            async with self._write_lock:
                updated = await self.post_repository.update(slug, patch)
            logfire.info(
                "Post updated",
                slug=updated.slug,
                category=updated.category.value,
                sub_category=updated.sub_category,
            )
            return updated

    async def delete_post(self, slug: str) -> None:
        """Delete a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.delete_post", slug=slug):
            async with self._write_lock:
                await self.post_repository.delete(slug)
            logfire.info("Post deleted", slug=slug)


def _matches(post: PostMeta, needle: str) -> bool:
    return (
        needle in post.title.lower()
        or needle in post.excerpt.lower()
        or any(needle in tag.lower() for tag in post.tags)
    )


def _check_tags(tags: Optional[list[str]]) -> None:
    if tags is not None and len(tags) > MAX_TAGS:
        raise ValidationError(f"A post can have at most {MAX_TAGS} tags")
