"""Delete sub-category use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.category.list_categories import CategoryTreeResponse
from blog.domain.service import CategoryService


class DeleteCategoryRequest(BaseModel):
    """Delete sub-category request."""

    value: str
    parent_sub_category: Optional[str] = None


class DeleteCategoryUseCase(BaseUseCase):
    """Use case for removing an empty tech sub-category."""

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize delete category use case.

        Args:
            category_service: Category domain service
        """
        self.category_service = category_service

    async def execute(self, request: DeleteCategoryRequest) -> CategoryTreeResponse:
        """Remove the entry and its directory.

        Raises:
            ProtectedCategoryError: For a default sub-category
            NotFoundError: If the entry does not exist
            CategoryNotEmptyError: If posts remain under it
        """
        with logfire.span(
            "delete_category.execute",
            value=request.value,
            parent=request.parent_sub_category,
        ):
            tree = await self.category_service.remove_sub_category(
                request.value, parent=request.parent_sub_category
            )
            return CategoryTreeResponse(tech_sub_categories=tree)
