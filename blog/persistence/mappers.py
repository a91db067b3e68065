"""Mappers between Markdown documents and domain models.

Frontmatter keys are camelCase (``subCategory``, ``coverImage``) so files
stay compatible with other tools reading the same content directory.

A post's directory is the source of truth for its category: frontmatter
``category`` and ``subCategory`` are only consulted when the location does
not say.
"""

from datetime import date
from pathlib import PurePath
from typing import Any, Optional

from blog.domain.model.post import Post
from blog.domain.value import PostCategory
from blog.util.frontmatter import as_iso_date


def category_from_path(
    relative: PurePath,
) -> tuple[Optional[PostCategory], Optional[str]]:
    """Derive category and sub-category from a path relative to the content root.

    ``tech/backend/python/x.md`` gives (tech, ``backend/python``);
    ``life/x.md`` gives (life, None). A file outside the category
    directories gives (None, None).
    """
    parts = relative.parts
    try:
        category = PostCategory(parts[0])
    except ValueError:
        return None, None

    if category is PostCategory.TECH and len(parts) > 2:
        return category, "/".join(parts[1:-1])
    return category, None


def _as_tags(value: Any) -> list[str]:
    if isinstance(value, str):
        return [t.strip() for t in value.split(",") if t.strip()]
    if isinstance(value, list):
        return [str(t) for t in value if t is not None]
    return []


def document_to_post(
    meta: dict[str, Any],
    body: str,
    relative: PurePath,
    modified: date,
) -> Post:
    """Convert a parsed document to a Post.

    Category and sub-category come from the file's location; frontmatter
    fills in only what the location leaves open (a tech post stored directly
    under ``tech/``). Title falls back to the file name and date to the
    modification time.

    Args:
        meta: Frontmatter mapping
        body: Markdown body
        relative: File path relative to the content root
        modified: File modification date

    Returns:
        Post domain model
    """
    slug = relative.stem
    category, sub_category = category_from_path(relative)

    if category is None:
        try:
            category = PostCategory(meta.get("category"))
        except ValueError:
            category = PostCategory.TECH

    if sub_category is None and category is PostCategory.TECH:
        sub_category = meta.get("subCategory")

    cover_image = meta.get("coverImage") or meta.get("cover")

    return Post(
        slug=slug,
        title=str(meta.get("title") or slug),
        date=as_iso_date(meta.get("date"), modified),
        excerpt=str(meta.get("excerpt") or ""),
        tags=_as_tags(meta.get("tags")),
        category=category,
        sub_category=str(sub_category) if sub_category else None,
        cover_image=str(cover_image) if cover_image else None,
        content=body,
    )


def post_to_frontmatter(post: Post) -> dict[str, Any]:
    """Convert a Post to its frontmatter mapping."""
    meta: dict[str, Any] = {
        "title": post.title,
        "date": post.date,
        "excerpt": post.excerpt,
        "tags": list(post.tags),
        "category": post.category.value,
    }
    if post.sub_category:
        meta["subCategory"] = post.sub_category
    if post.cover_image:
        meta["coverImage"] = post.cover_image
    return meta
