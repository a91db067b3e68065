"""Unit tests for CategoryService."""

from pathlib import PurePath

import pytest

from blog.domain.error import (
    CategoryNotEmptyError,
    ConflictError,
    NotFoundError,
    ProtectedCategoryError,
)
from blog.domain.model.category import SubCategory
from blog.domain.repository import PostRepository
from blog.domain.service import CategoryService, PostService
from blog.domain.value import PostCategory
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddSubCategory:
    """Tests for add_sub_category."""

    @pytest.mark.asyncio
    async def test_add_top_level_entry_creates_directory(self, unit_env):
        """A new entry should be appended and get a directory."""
        # Arrange
        service = await unit_env.get(CategoryService)
        repo = await unit_env.get(PostRepository)

        # Act
        tree = await service.add_sub_category(
            SubCategory(value="devops", label="DevOps", icon="🚀")
        )

        # Assert
        assert [e.value for e in tree] == [
            "frontend",
            "backend",
            "ai",
            "other",
            "devops",
        ]
        assert PurePath("tech/devops") in repo.directories

    @pytest.mark.asyncio
    async def test_add_child_entry(self, unit_env):
        """A child should be stored under its parent."""
        # Arrange
        service = await unit_env.get(CategoryService)
        repo = await unit_env.get(PostRepository)

        # Act
        tree = await service.add_sub_category(
            SubCategory(value="python", label="Python"), parent="backend"
        )

        # Assert
        backend = next(e for e in tree if e.value == "backend")
        assert [c.value for c in backend.children] == ["python"]
        assert PurePath("tech/backend/python") in repo.directories

    @pytest.mark.asyncio
    async def test_add_duplicate_conflicts(self, unit_env):
        """An existing value at the same level should be rejected."""
        service = await unit_env.get(CategoryService)

        with pytest.raises(ConflictError):
            await service.add_sub_category(SubCategory(value="ai", label="AI again"))

    @pytest.mark.asyncio
    async def test_add_under_unknown_parent_raises(self, unit_env):
        """The parent must exist."""
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError):
            await service.add_sub_category(
                SubCategory(value="rust", label="Rust"), parent="systems"
            )


class TestUpdateSubCategory:
    """Tests for update_sub_category."""

    @pytest.mark.asyncio
    async def test_update_label_keeps_children(self, unit_env):
        """Relabeling a parent should not drop its children."""
        # Arrange
        service = await unit_env.get(CategoryService)
        await service.add_sub_category(
            SubCategory(value="python", label="Python"), parent="backend"
        )

        # Act
        tree = await service.update_sub_category("backend", label="Server side")

        # Assert
        backend = next(e for e in tree if e.value == "backend")
        assert backend.label == "Server side"
        assert backend.icon == "⚙️"
        assert [c.value for c in backend.children] == ["python"]

    @pytest.mark.asyncio
    async def test_update_unknown_entry_raises(self, unit_env):
        """Updating a missing entry should raise NotFoundError."""
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError):
            await service.update_sub_category("nope", label="Nope")


class TestRemoveSubCategory:
    """Tests for remove_sub_category."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["frontend", "backend", "ai", "other"])
    async def test_default_entries_are_protected(self, unit_env, value):
        """Default sub-categories cannot be deleted."""
        service = await unit_env.get(CategoryService)

        with pytest.raises(ProtectedCategoryError):
            await service.remove_sub_category(value)

    @pytest.mark.asyncio
    async def test_non_empty_entry_is_kept(self, unit_env):
        """Deleting a sub-category with posts should report how many remain."""
        # Arrange
        service = await unit_env.get(CategoryService)
        post_service = await unit_env.get(PostService)
        await service.add_sub_category(SubCategory(value="devops", label="DevOps"))
        await post_service.create_post(
            title="K8s", content="x", category=PostCategory.TECH, sub_category="devops"
        )

        # Act
        with pytest.raises(CategoryNotEmptyError) as exc_info:
            await service.remove_sub_category("devops")

        # Assert
        assert exc_info.value.count == 1
        assert "devops" in [e.value for e in await service.get_tree()]

    @pytest.mark.asyncio
    async def test_posts_in_children_count_towards_parent(self, unit_env):
        """Posts in a nested sub-category keep the parent from being removed."""
        # Arrange
        service = await unit_env.get(CategoryService)
        post_service = await unit_env.get(PostService)
        await service.add_sub_category(SubCategory(value="devops", label="DevOps"))
        await service.add_sub_category(
            SubCategory(value="k8s", label="K8s"), parent="devops"
        )
        await post_service.create_post(
            title="Pods",
            content="x",
            category=PostCategory.TECH,
            sub_category="devops/k8s",
        )

        # Act & Assert
        with pytest.raises(CategoryNotEmptyError):
            await service.remove_sub_category("devops")

    @pytest.mark.asyncio
    async def test_remove_empty_entry(self, unit_env):
        """An empty custom sub-category should be removed with its directory."""
        # Arrange
        service = await unit_env.get(CategoryService)
        repo = await unit_env.get(PostRepository)
        await service.add_sub_category(SubCategory(value="devops", label="DevOps"))

        # Act
        tree = await service.remove_sub_category("devops")

        # Assert
        assert "devops" not in [e.value for e in tree]
        assert PurePath("tech/devops") not in repo.directories

    @pytest.mark.asyncio
    async def test_remove_child_of_default_entry(self, unit_env):
        """Children of default entries are not protected."""
        # Arrange
        service = await unit_env.get(CategoryService)
        await service.add_sub_category(
            SubCategory(value="python", label="Python"), parent="backend"
        )

        # Act
        tree = await service.remove_sub_category("python", parent="backend")

        # Assert
        backend = next(e for e in tree if e.value == "backend")
        assert backend.children == []

    @pytest.mark.asyncio
    async def test_remove_unknown_entry_raises(self, unit_env):
        """Removing a missing entry should raise NotFoundError."""
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError):
            await service.remove_sub_category("ghost")
