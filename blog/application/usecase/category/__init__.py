"""Category use cases."""

from .add_category import AddCategoryRequest, AddCategoryUseCase
from .delete_category import DeleteCategoryRequest, DeleteCategoryUseCase
from .list_categories import (
    CategoryInfo,
    CategoryTreeResponse,
    ListCategoriesRequest,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)
from .update_category import UpdateCategoryRequest, UpdateCategoryUseCase

__all__ = [
    "AddCategoryRequest",
    "AddCategoryUseCase",
    "CategoryInfo",
    "CategoryTreeResponse",
    "DeleteCategoryRequest",
    "DeleteCategoryUseCase",
    "ListCategoriesRequest",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
    "UpdateCategoryRequest",
    "UpdateCategoryUseCase",
]
