"""Category taxonomy repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.category import SubCategory


class CategoryRepository(ABC):
    """Repository for the tech sub-category tree.

    The tree is a single small document; every mutation rewrites it whole.
    """

    @abstractmethod
    async def get_tree(self) -> list[SubCategory]:
        """Load the tree, or the default sub-categories if none is stored."""
        pass

    @abstractmethod
    async def save_tree(self, tree: list[SubCategory]) -> None:
        """Replace the stored tree."""
        pass

    async def upsert_entry(
        self, parent: Optional[str], entry: SubCategory
    ) -> list[SubCategory]:
        """Insert an entry, or replace the sibling with the same value.

        A replaced top-level entry keeps its existing children.

        Args:
            parent: Value of the parent entry, None for top level
            entry: Entry to store

        Returns:
            The updated tree

        Raises:
            KeyError: If the parent does not exist
        """
        tree = await self.get_tree()

        if parent is None:
            siblings = tree
        else:
            index = _index_of(tree, parent)
            if index is None:
                raise KeyError(parent)
            siblings = list(tree[index].children)

        position = _index_of(siblings, entry.value)
        if position is None:
            siblings = [*siblings, entry]
        else:
            if parent is None:
                children = siblings[position].children
                entry = entry.model_copy(update={"children": children})
            siblings = [*siblings[:position], entry, *siblings[position + 1 :]]

        if parent is None:
            tree = siblings
        else:
            index = _index_of(tree, parent)
            tree = [
                *tree[:index],
                tree[index].model_copy(update={"children": siblings}),
                *tree[index + 1 :],
            ]

        await self.save_tree(tree)
        return tree

    async def remove_entry(
        self, parent: Optional[str], value: str
    ) -> list[SubCategory]:
        """Remove an entry.

        Args:
            parent: Value of the parent entry, None for top level
            value: Value of the entry to remove

        Returns:
            The updated tree

        Raises:
            KeyError: If the parent or the entry does not exist
        """
        tree = await self.get_tree()

        if parent is None:
            if _index_of(tree, value) is None:
                raise KeyError(value)
            tree = [entry for entry in tree if entry.value != value]
        else:
            index = _index_of(tree, parent)
            if index is None or tree[index].find_child(value) is None:
                raise KeyError(value)
            children = [c for c in tree[index].children if c.value != value]
            tree = [
                *tree[:index],
                tree[index].model_copy(update={"children": children}),
                *tree[index + 1 :],
            ]

        await self.save_tree(tree)
        return tree


def _index_of(entries: list[SubCategory], value: str) -> Optional[int]:
    return next((i for i, e in enumerate(entries) if e.value == value), None)
