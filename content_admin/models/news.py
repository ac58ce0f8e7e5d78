"""News article models."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from content_admin.models.base import CamelModel, EntityPatch


class NewsArticleCreate(CamelModel):
    """Fields supplied when creating a news article."""

    title: str
    content: str
    excerpt: str
    image: str | None = Field(default=None, description="Image URL")


class NewsArticlePatch(EntityPatch):
    """Partial news article update. Sending ``image: null`` removes the image."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"image"})

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    image: str | None = None


class NewsArticle(NewsArticleCreate):
    """Stored news article record."""

    id: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
