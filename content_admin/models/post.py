"""Post models for downloadable content."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from content_admin.models.base import CamelModel, EntityPatch


class DownloadFile(CamelModel):
    """Metadata of a file attached to a post.

    The bytes live in external file storage; only the reference is kept.
    """

    name: str
    url: str
    size: int = Field(..., ge=0, description="Size in bytes")


class PostCreate(CamelModel):
    """Fields supplied when creating a post."""

    title: str
    description: str
    category_id: str = Field(..., description="Category id (not checked for existence)")
    price: str
    images: list[str] = Field(default_factory=list)
    download_files: list[DownloadFile] = Field(default_factory=list)


class PostPatch(EntityPatch):
    """Partial post update.

    ``images`` and ``download_files`` are replaced wholesale when present;
    an explicit empty list clears them.
    """

    list_fields: ClassVar[frozenset[str]] = frozenset({"images", "download_files"})

    title: str | None = None
    description: str | None = None
    category_id: str | None = None
    price: str | None = None
    images: list[str] | None = None
    download_files: list[DownloadFile] | None = None


class Post(PostCreate):
    """Stored post record."""

    id: str
    # Kept as text; incremented by parsing and re-formatting.
    download_count: str = "0"
    created_at: datetime = Field(default_factory=datetime.utcnow)
