"""Category models."""

from pydantic import Field

from content_admin.models.base import CamelModel, EntityPatch


class CategoryCreate(CamelModel):
    """Fields supplied when creating a category."""

    slug: str = Field(..., description="Human-readable identifier, e.g. '3d-models'")
    name: str


class CategoryPatch(EntityPatch):
    """Partial category update."""

    slug: str | None = None
    name: str | None = None


class Category(CategoryCreate):
    """Stored category record."""

    id: str


# Seeded into every fresh store, in this order.
DEFAULT_CATEGORIES: tuple[CategoryCreate, ...] = (
    CategoryCreate(slug="games", name="Games"),
    CategoryCreate(slug="software", name="Software"),
    CategoryCreate(slug="3d-models", name="3D Models"),
    CategoryCreate(slug="textures", name="Textures"),
    CategoryCreate(slug="audio", name="Audio"),
)
