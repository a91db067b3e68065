"""Update sub-category use case."""

from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.category.list_categories import CategoryTreeResponse
from blog.domain.service import CategoryService


class UpdateCategoryRequest(BaseModel):
    """Update sub-category request."""

    value: str
    label: Optional[str] = None
    icon: Optional[str] = None
    parent_sub_category: Optional[str] = None


class UpdateCategoryUseCase(BaseUseCase):
    """Use case for renaming or re-iconing a tech sub-category."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: UpdateCategoryRequest) -> CategoryTreeResponse:
        """Change label and icon; the value (and directory) stay the same.

        Raises:
            NotFoundError: If the entry does not exist
        """
        tree = await self.category_service.update_sub_category(
            request.value,
            label=request.label,
            icon=request.icon,
            parent=request.parent_sub_category,
        )
        return CategoryTreeResponse(tech_sub_categories=tree)
