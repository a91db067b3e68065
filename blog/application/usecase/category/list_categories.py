"""List categories use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.model.category import SubCategory
from blog.domain.service import CategoryService
from blog.domain.value import PostCategory


class CategoryInfo(CamelModel):
    """A fixed top-level category."""

    value: PostCategory
    name: str
    description: str
    icon: str
    has_sub_categories: bool


class CategoryTreeResponse(CamelModel):
    """Tech sub-category tree."""

    tech_sub_categories: list[SubCategory]


class ListCategoriesRequest(BaseModel):
    """List categories request."""

    pass


class ListCategoriesResponse(CategoryTreeResponse):
    """Top-level categories and the tech sub-category tree."""

    categories: list[CategoryInfo]


class ListCategoriesUseCase(BaseUseCase):
    """Use case for reading the category taxonomy."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: ListCategoriesRequest) -> ListCategoriesResponse:
        tree = await self.category_service.get_tree()
        return ListCategoriesResponse(
            categories=[
                CategoryInfo(
                    value=category,
                    name=category.display_name,
                    description=category.description,
                    icon=category.icon,
                    has_sub_categories=category.has_sub_categories,
                )
                for category in PostCategory
            ],
            tech_sub_categories=tree,
        )
