"""Integration tests for JsonCategoryRepository."""

import json

import pytest

from blog.domain.model.category import DEFAULT_SUB_CATEGORIES, SubCategory
from blog.persistence.repository import JsonCategoryRepository


class TestJsonCategoryRepository:
    """Tests for the categories.json document."""

    @pytest.mark.asyncio
    async def test_missing_file_serves_defaults(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path)

        assert await repo.get_tree() == list(DEFAULT_SUB_CATEGORIES)

    @pytest.mark.asyncio
    async def test_empty_list_serves_defaults(self, tmp_path):
        (tmp_path / "categories.json").write_text('{"techSubCategories": []}')
        repo = JsonCategoryRepository(tmp_path)

        assert await repo.get_tree() == list(DEFAULT_SUB_CATEGORIES)

    @pytest.mark.asyncio
    async def test_saved_tree_is_read_back(self, tmp_path):
        """A nested tree should survive a save and a fresh repository."""
        # Arrange
        tree = [
            SubCategory(
                value="backend",
                label="后端开发",
                icon="⚙️",
                children=[SubCategory(value="python", label="Python")],
            )
        ]

        # Act
        await JsonCategoryRepository(tmp_path).save_tree(tree)
        loaded = await JsonCategoryRepository(tmp_path).get_tree()

        # Assert
        assert loaded == tree
        document = json.loads((tmp_path / "categories.json").read_text("utf-8"))
        assert document["techSubCategories"][0]["children"][0]["value"] == "python"
        assert "后端开发" in (tmp_path / "categories.json").read_text("utf-8")

    @pytest.mark.asyncio
    async def test_upsert_keeps_children_of_replaced_entry(self, tmp_path):
        # Arrange
        repo = JsonCategoryRepository(tmp_path)
        await repo.upsert_entry("backend", SubCategory(value="go", label="Go"))

        # Act
        tree = await repo.upsert_entry(
            None, SubCategory(value="backend", label="Server")
        )

        # Assert
        backend = next(e for e in tree if e.value == "backend")
        assert backend.label == "Server"
        assert [c.value for c in backend.children] == ["go"]

    @pytest.mark.asyncio
    async def test_remove_unknown_entry_raises(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path)

        with pytest.raises(KeyError):
            await repo.remove_entry("backend", "missing")
