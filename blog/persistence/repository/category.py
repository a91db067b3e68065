"""JSON file category repository."""

import json
import logging
from pathlib import Path

from blog.domain.model.category import DEFAULT_SUB_CATEGORIES, SubCategory
from blog.domain.repository import CategoryRepository
from blog.persistence.files import write_text_atomic

logger = logging.getLogger(__name__)

CATEGORIES_FILE = "categories.json"


class JsonCategoryRepository(CategoryRepository):
    """Stores the sub-category tree in ``<content root>/categories.json``.

    File format::

        {"techSubCategories": [
            {"value": "...", "label": "...", "icon": "...", "children": [...]}
        ]}
    """

    def __init__(self, root: Path) -> None:
        self.path = root / CATEGORIES_FILE

    async def get_tree(self) -> list[SubCategory]:
        if not self.path.exists():
            return list(DEFAULT_SUB_CATEGORIES)

        data = json.loads(self.path.read_text(encoding="utf-8"))
        entries = data.get("techSubCategories")
        if not entries:
            return list(DEFAULT_SUB_CATEGORIES)
        return [SubCategory.model_validate(entry) for entry in entries]

    async def save_tree(self, tree: list[SubCategory]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        document = {"techSubCategories": [entry.model_dump() for entry in tree]}
        write_text_atomic(
            self.path, json.dumps(document, ensure_ascii=False, indent=2) + "\n"
        )
        logger.info("Saved %d sub-categories to %s", len(tree), self.path)
