"""Post aggregate.

A post is one Markdown file. Its location on disk is derived from the
category and sub-category; its slug is the file name.
"""

import math
from typing import Any, Optional

from pydantic import Field, model_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import DEFAULT_SUB_CATEGORY, PostCategory

WORDS_PER_MINUTE = 200

# Upper bound on tags for any post written through the API
MAX_TAGS = 10


def reading_time(text: str) -> int:
    """Estimated reading time in whole minutes (at least one)."""
    words = len(text.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


class PostMeta(DomainModel):
    """Post metadata as shown in listings."""

    slug: str
    title: str
    date: str
    excerpt: str = ""
    tags: list[str] = Field(default_factory=list)
    category: PostCategory
    sub_category: Optional[str] = None
    cover_image: Optional[str] = None
    reading_time: int = 1


class PostPatch(DomainModel):
    """Partial update for a post; ``None`` means keep the current value."""

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    tags: Optional[list[str]] = None
    category: Optional[PostCategory] = None
    sub_category: Optional[str] = None


class Post(DomainModel):
    """Post aggregate root.

    Sub-categories only apply to tech posts: a tech post without one is
    filed under ``other``, and any other category drops it.
    """

    slug: str = Field(min_length=1)
    title: str
    date: str
    excerpt: str = ""
    tags: list[str] = Field(default_factory=list)
    category: PostCategory
    sub_category: Optional[str] = None
    cover_image: Optional[str] = None
    content: str = ""

    @model_validator(mode="before")
    @classmethod
    def normalize_sub_category(cls, data: Any) -> Any:
        """Keep the sub-category consistent with the category."""
        if not isinstance(data, dict):
            return data
        try:
            category = PostCategory(data.get("category"))
        except ValueError:
            # Let field validation report the bad category
            return data

        data = dict(data)
        if category is PostCategory.TECH:
            data["sub_category"] = data.get("sub_category") or DEFAULT_SUB_CATEGORY
        else:
            data["sub_category"] = None
        return data

    def apply(self, patch: PostPatch) -> "Post":
        """Merge provided patch fields over this post.

        The sub-category survives a patch that does not mention it, unless
        the category changes away from tech.
        """
        return Post(
            slug=self.slug,
            title=patch.title if patch.title is not None else self.title,
            date=self.date,
            excerpt=patch.excerpt if patch.excerpt is not None else self.excerpt,
            tags=patch.tags if patch.tags is not None else self.tags,
            category=patch.category or self.category,
            sub_category=patch.sub_category or self.sub_category,
            cover_image=self.cover_image,
            content=patch.content if patch.content is not None else self.content,
        )

    def meta(self) -> PostMeta:
        """Listing view of this post."""
        return PostMeta(
            slug=self.slug,
            title=self.title,
            date=self.date,
            excerpt=self.excerpt,
            tags=list(self.tags),
            category=self.category,
            sub_category=self.sub_category,
            cover_image=self.cover_image,
            reading_time=reading_time(self.content),
        )
