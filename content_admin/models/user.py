"""User models."""

from pydantic import Field

from content_admin.models.base import CamelModel


class UserCreate(CamelModel):
    """Fields supplied when creating a user."""

    username: str
    password: str


class User(UserCreate):
    """Stored user record."""

    id: str = Field(..., description="Generated unique identifier")
