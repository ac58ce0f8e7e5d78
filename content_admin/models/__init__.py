"""Data models for the application."""

from content_admin.models.base import CamelModel, EntityPatch
from content_admin.models.category import (
    DEFAULT_CATEGORIES,
    Category,
    CategoryCreate,
    CategoryPatch,
)
from content_admin.models.news import NewsArticle, NewsArticleCreate, NewsArticlePatch
from content_admin.models.post import DownloadFile, Post, PostCreate, PostPatch
from content_admin.models.user import User, UserCreate

__all__ = [
    # Base
    "CamelModel",
    "EntityPatch",
    # User
    "User",
    "UserCreate",
    # Category
    "Category",
    "CategoryCreate",
    "CategoryPatch",
    "DEFAULT_CATEGORIES",
    # Post
    "DownloadFile",
    "Post",
    "PostCreate",
    "PostPatch",
    # News
    "NewsArticle",
    "NewsArticleCreate",
    "NewsArticlePatch",
]
