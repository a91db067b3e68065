"""Category routes."""

from typing import Literal, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blog.application.usecase.category import (
    AddCategoryRequest,
    AddCategoryUseCase,
    CategoryTreeResponse,
    DeleteCategoryRequest,
    DeleteCategoryUseCase,
    ListCategoriesRequest,
    ListCategoriesResponse,
    ListCategoriesUseCase,
    UpdateCategoryRequest,
    UpdateCategoryUseCase,
)
from blog.domain.error import DomainError
from blog.interface.api.errors import internal_error, to_http_exception
from blog.interface.api.guard import RequestGuard

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)

VALUE_PATTERN = r"^[a-z0-9-]+$"


class _CategoryAPIRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    value: str = Field(min_length=1, max_length=50, pattern=VALUE_PATTERN)
    # Only tech has sub-categories
    parent_category: Optional[Literal["tech"]] = None
    parent_sub_category: Optional[str] = Field(
        default=None, min_length=1, max_length=50, pattern=VALUE_PATTERN
    )


class AddCategoryAPIRequest(_CategoryAPIRequest):
    """API request for adding a sub-category."""

    label: str = Field(min_length=1, max_length=50)
    icon: Optional[str] = Field(default=None, min_length=1, max_length=10)


class UpdateCategoryAPIRequest(_CategoryAPIRequest):
    """API request for changing a sub-category's label or icon."""

    label: Optional[str] = Field(default=None, min_length=1, max_length=50)
    icon: Optional[str] = Field(default=None, min_length=1, max_length=10)


class DeleteCategoryAPIRequest(_CategoryAPIRequest):
    """API request for deleting a sub-category."""

    pass


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    request: Request,
    guard: FromDishka[RequestGuard],
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """Top-level categories and the tech sub-category tree."""
    guard.check_rate_limit(request, "categories:get")

    try:
        return await list_categories_use_case.execute(ListCategoriesRequest())
    except Exception as e:
        raise internal_error(e, "Failed to load categories")


@router.post("", response_model=CategoryTreeResponse)
async def add_category(
    body: AddCategoryAPIRequest,
    request: Request,
    guard: FromDishka[RequestGuard],
    add_category_use_case: FromDishka[AddCategoryUseCase],
) -> CategoryTreeResponse:
    """Add a tech sub-category, optionally under a parent. Requires authentication.

    Raises:
        HTTPException: 401, 404 unknown parent, 409 duplicate, 429
    """
    guard.check_rate_limit(request, "categories:create")
    await guard.require_admin(request)

    try:
        return await add_category_use_case.execute(
            AddCategoryRequest(
                value=body.value,
                label=body.label,
                icon=body.icon,
                parent_sub_category=body.parent_sub_category,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to add category")
    except Exception as e:
        raise internal_error(e, "Failed to add category")


@router.patch("", response_model=CategoryTreeResponse)
async def update_category(
    body: UpdateCategoryAPIRequest,
    request: Request,
    guard: FromDishka[RequestGuard],
    update_category_use_case: FromDishka[UpdateCategoryUseCase],
) -> CategoryTreeResponse:
    """Change a sub-category's label or icon. Requires authentication."""
    guard.check_rate_limit(request, "categories:update")
    await guard.require_admin(request)

    try:
        return await update_category_use_case.execute(
            UpdateCategoryRequest(
                value=body.value,
                label=body.label,
                icon=body.icon,
                parent_sub_category=body.parent_sub_category,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to update category")
    except Exception as e:
        raise internal_error(e, "Failed to update category")


@router.delete("", response_model=CategoryTreeResponse)
async def delete_category(
    body: DeleteCategoryAPIRequest,
    request: Request,
    guard: FromDishka[RequestGuard],
    delete_category_use_case: FromDishka[DeleteCategoryUseCase],
) -> CategoryTreeResponse:
    """Delete an empty, non-default sub-category. Requires authentication.

    Raises:
        HTTPException: 400 for a default or non-empty sub-category (with
            the number of remaining posts), 401, 404, 429
    """
    guard.check_rate_limit(request, "categories:delete")
    await guard.require_admin(request)

    try:
        return await delete_category_use_case.execute(
            DeleteCategoryRequest(
                value=body.value, parent_sub_category=body.parent_sub_category
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to delete category")
    except Exception as e:
        raise internal_error(e, "Failed to delete category")
