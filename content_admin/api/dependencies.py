"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from content_admin.core.exceptions import EntityNotFound
from content_admin.models import Category, NewsArticle, Post
from content_admin.storage.base import StorageBackend


def get_storage(request: Request) -> StorageBackend:
    """Get the storage backend created with the application."""
    return request.app.state.storage


# Type aliases for cleaner dependency injection
StorageDep = Annotated[StorageBackend, Depends(get_storage)]


async def get_category_from_path(category_id: str, storage: StorageDep) -> Category:
    """Get category from path parameter."""
    category = await storage.get_category_by_id(category_id)
    if not category:
        raise EntityNotFound("category", category_id)
    return category


async def get_post_from_path(post_id: str, storage: StorageDep) -> Post:
    """Get post from path parameter."""
    post = await storage.get_post_by_id(post_id)
    if not post:
        raise EntityNotFound("post", post_id)
    return post


async def get_news_article_from_path(article_id: str, storage: StorageDep) -> NewsArticle:
    """Get news article from path parameter."""
    article = await storage.get_news_article_by_id(article_id)
    if not article:
        raise EntityNotFound("news_article", article_id)
    return article


CategoryFromPath = Annotated[Category, Depends(get_category_from_path)]
PostFromPath = Annotated[Post, Depends(get_post_from_path)]
NewsArticleFromPath = Annotated[NewsArticle, Depends(get_news_article_from_path)]
