"""Category taxonomy domain service."""

import asyncio
from typing import Optional

import logfire

from blog.domain.error import (
    CategoryNotEmptyError,
    ConflictError,
    NotFoundError,
    ProtectedCategoryError,
)
from blog.domain.model.category import (
    PROTECTED_SUB_CATEGORIES,
    SubCategory,
    find_entry,
)
from blog.domain.repository import CategoryRepository, PostRepository
from blog.domain.value import PostCategory

from .base import Service


class CategoryService(Service):
    """Domain service for the tech sub-category tree.

    The taxonomy is one small document rewritten on every change, so all
    mutations are serialized behind a single lock.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize category service.

        Args:
            category_repository: Taxonomy storage
            post_repository: Post storage, owner of the category directories
        """
        self.category_repository = category_repository
        self.post_repository = post_repository
        self._lock = asyncio.Lock()

    async def get_tree(self) -> list[SubCategory]:
        """Current sub-category tree."""
        return await self.category_repository.get_tree()

    async def ensure_directories(self) -> None:
        """Create directories for every category in the tree."""
        with logfire.span("category_service.ensure_directories"):
            tree = await self.category_repository.get_tree()
            await self.post_repository.ensure_directories(tree)

    async def add_sub_category(
        self, entry: SubCategory, parent: Optional[str] = None
    ) -> list[SubCategory]:
        """Add a sub-category, top level or under a parent.

        Args:
            entry: New entry (children are ignored)
            parent: Value of the parent entry for a nested sub-category

        Returns:
            Updated tree

        Raises:
            NotFoundError: If the parent does not exist
            ConflictError: If a sibling with the same value exists
        """
        entry = entry.model_copy(update={"children": []})

        with logfire.span(
            "category_service.add_sub_category", value=entry.value, parent=parent
        ):
            async with self._lock:
                tree = await self.category_repository.get_tree()

                if parent is not None:
                    parent_entry = find_entry(tree, parent)
                    if parent_entry is None:
                        raise NotFoundError("Sub-category", parent)
                    if parent_entry.find_child(entry.value) is not None:
                        raise ConflictError("Sub-category", f"{parent}/{entry.value}")
                elif find_entry(tree, entry.value) is not None:
                    raise ConflictError("Sub-category", entry.value)

                tree = await self.category_repository.upsert_entry(parent, entry)
                await self.post_repository.ensure_directories(tree)

            logfire.info("Sub-category added", value=entry.value, parent=parent)
            return tree

    async def update_sub_category(
        self,
        value: str,
        label: Optional[str] = None,
        icon: Optional[str] = None,
        parent: Optional[str] = None,
    ) -> list[SubCategory]:
        """Change the label or icon of an existing sub-category.

        Raises:
            NotFoundError: If the entry or its parent does not exist
        """
        with logfire.span(
            "category_service.update_sub_category", value=value, parent=parent
        ):
            async with self._lock:
                tree = await self.category_repository.get_tree()
                current = _lookup(tree, value, parent)

                updates = {}
                if label is not None:
                    updates["label"] = label
                if icon is not None:
                    updates["icon"] = icon
                # Revalidate label and icon lengths
                updated = SubCategory.model_validate(
                    {**current.model_dump(), **updates}
                )

                tree = await self.category_repository.upsert_entry(parent, updated)

            logfire.info("Sub-category updated", value=value, parent=parent)
            return tree

    async def remove_sub_category(
        self, value: str, parent: Optional[str] = None
    ) -> list[SubCategory]:
        """Remove an empty sub-category and its directory.

        Raises:
            ProtectedCategoryError: If the value is a default top-level entry
            NotFoundError: If the entry or its parent does not exist
            CategoryNotEmptyError: If posts remain under its directory
        """
        with logfire.span(
            "category_service.remove_sub_category", value=value, parent=parent
        ):
            if parent is None and value in PROTECTED_SUB_CATEGORIES:
                logfire.warn("Refused to delete default sub-category", value=value)
                raise ProtectedCategoryError(value)

            async with self._lock:
                tree = await self.category_repository.get_tree()
                _lookup(tree, value, parent)

                path = f"{parent}/{value}" if parent else value
                count = await self.post_repository.count_posts(PostCategory.TECH, path)
                if count:
                    logfire.warn(
                        "Refused to delete non-empty sub-category",
                        value=path,
                        count=count,
                    )
                    raise CategoryNotEmptyError(path, count)

                await self.post_repository.remove_directory(PostCategory.TECH, path)
                tree = await self.category_repository.remove_entry(parent, value)

            logfire.info("Sub-category removed", value=value, parent=parent)
            return tree


def _lookup(tree: list[SubCategory], value: str, parent: Optional[str]) -> SubCategory:
    if parent is None:
        entry = find_entry(tree, value)
        if entry is None:
            raise NotFoundError("Sub-category", value)
        return entry

    parent_entry = find_entry(tree, parent)
    if parent_entry is None:
        raise NotFoundError("Sub-category", parent)
    entry = parent_entry.find_child(value)
    if entry is None:
        raise NotFoundError("Sub-category", f"{parent}/{value}")
    return entry
