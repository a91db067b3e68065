"""In-memory implementation of Category repository for testing."""

from typing import Optional

from blog.domain.model.category import DEFAULT_SUB_CATEGORIES, SubCategory
from blog.domain.repository import CategoryRepository


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        """Initialize with nothing stored (defaults are served)."""
        self._tree: Optional[list[SubCategory]] = None

    async def get_tree(self) -> list[SubCategory]:
        """Stored tree, or the defaults."""
        if self._tree is None:
            return list(DEFAULT_SUB_CATEGORIES)
        return list(self._tree)

    async def save_tree(self, tree: list[SubCategory]) -> None:
        """Replace the stored tree."""
        self._tree = list(tree)
