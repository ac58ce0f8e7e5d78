"""API routes."""

from content_admin.api.routes.categories import router as categories_router
from content_admin.api.routes.health import router as health_router
from content_admin.api.routes.news import router as news_router
from content_admin.api.routes.posts import router as posts_router

__all__ = ["categories_router", "health_router", "news_router", "posts_router"]
