"""Add sub-category use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.category.list_categories import CategoryTreeResponse
from blog.domain.model.category import DEFAULT_ICON, SubCategory
from blog.domain.service import CategoryService


class AddCategoryRequest(BaseModel):
    """Add sub-category request."""

    value: str
    label: str
    icon: Optional[str] = None
    parent_sub_category: Optional[str] = None


class AddCategoryUseCase(BaseUseCase):
    """Use case for adding a tech sub-category."""

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize add category use case.

        Args:
            category_service: Category domain service
        """
        self.category_service = category_service

    async def execute(self, request: AddCategoryRequest) -> CategoryTreeResponse:
        """Add the entry and create its directory.

        Raises:
            NotFoundError: If the parent does not exist
            ConflictError: If the value is already used at that level
        """
        with logfire.span(
            "add_category.execute",
            value=request.value,
            parent=request.parent_sub_category,
        ):
            entry = SubCategory(
                value=request.value,
                label=request.label,
                icon=request.icon or DEFAULT_ICON,
            )
            tree = await self.category_service.add_sub_category(
                entry, parent=request.parent_sub_category
            )
            return CategoryTreeResponse(tech_sub_categories=tree)
