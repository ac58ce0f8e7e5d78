"""Category endpoints."""

import structlog
from fastapi import APIRouter, status

from content_admin.api.dependencies import CategoryFromPath, StorageDep
from content_admin.core.exceptions import EntityNotFound
from content_admin.models import Category, CategoryCreate, CategoryPatch

logger = structlog.get_logger()

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("", response_model=list[Category])
async def list_categories(storage: StorageDep) -> list[Category]:
    """List all categories."""
    return await storage.get_categories()


@router.get("/slug/{slug}", response_model=Category)
async def get_category_by_slug(slug: str, storage: StorageDep) -> Category:
    """Get a category by its slug."""
    category = await storage.get_category_by_slug(slug)
    if not category:
        raise EntityNotFound("category", slug)
    return category


@router.get("/{category_id}", response_model=Category)
async def get_category(category: CategoryFromPath) -> Category:
    """Get a specific category."""
    return category


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(data: CategoryCreate, storage: StorageDep) -> Category:
    """Create a new category."""
    category = await storage.create_category(data)
    logger.info("Created category", category_id=category.id, slug=category.slug)
    return category


@router.put("/{category_id}", response_model=Category)
async def update_category(
    category_id: str,
    data: CategoryPatch,
    storage: StorageDep,
) -> Category:
    """Update the supplied fields of a category."""
    category = await storage.update_category(category_id, data)
    if not category:
        raise EntityNotFound("category", category_id)

    logger.info("Updated category", category_id=category_id)
    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: str, storage: StorageDep) -> None:
    """Delete a category. Posts referring to it are left as they are."""
    if not await storage.delete_category(category_id):
        raise EntityNotFound("category", category_id)

    logger.info("Deleted category", category_id=category_id)
