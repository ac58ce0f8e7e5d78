"""Abstract base class for storage backends."""

from abc import ABC, abstractmethod

from content_admin.models import (
    Category,
    CategoryCreate,
    CategoryPatch,
    NewsArticle,
    NewsArticleCreate,
    NewsArticlePatch,
    Post,
    PostCreate,
    PostPatch,
    User,
    UserCreate,
)


class StorageBackend(ABC):
    """Abstract storage backend interface.

    Lookups return ``None`` when the entity does not exist and deletes
    return whether something was removed. Missing entities never raise.
    """

    # ==================== User Operations ====================

    @abstractmethod
    async def get_user(self, user_id: str) -> User | None:
        """Get a user by ID."""
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None:
        """Get a user by exact, case-sensitive username."""
        ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User:
        """Create a user with a generated ID."""
        ...

    # ==================== Category Operations ====================

    @abstractmethod
    async def get_categories(self) -> list[Category]:
        """List all categories."""
        ...

    @abstractmethod
    async def get_category_by_id(self, category_id: str) -> Category | None:
        """Get a category by ID."""
        ...

    @abstractmethod
    async def get_category_by_slug(self, slug: str) -> Category | None:
        """Get the first category with the given slug."""
        ...

    @abstractmethod
    async def create_category(self, data: CategoryCreate) -> Category:
        """Create a category with a generated ID."""
        ...

    @abstractmethod
    async def update_category(self, category_id: str, patch: CategoryPatch) -> Category | None:
        """Apply a partial update to a category."""
        ...

    @abstractmethod
    async def delete_category(self, category_id: str) -> bool:
        """Delete a category."""
        ...

    # ==================== Post Operations ====================

    @abstractmethod
    async def get_posts(self, category_id: str | None = None) -> list[Post]:
        """List posts.

        Filtered by category when ``category_id`` is given, otherwise all
        posts newest first.
        """
        ...

    @abstractmethod
    async def get_post_by_id(self, post_id: str) -> Post | None:
        """Get a post by ID."""
        ...

    @abstractmethod
    async def create_post(self, data: PostCreate) -> Post:
        """Create a post with a generated ID, timestamp and zero downloads."""
        ...

    @abstractmethod
    async def update_post(self, post_id: str, patch: PostPatch) -> Post | None:
        """Apply a partial update to a post."""
        ...

    @abstractmethod
    async def delete_post(self, post_id: str) -> bool:
        """Delete a post."""
        ...

    @abstractmethod
    async def increment_download_count(self, post_id: str) -> None:
        """Add one to a post's download counter. No-op for unknown IDs."""
        ...

    @abstractmethod
    async def search_posts(self, query: str) -> list[Post]:
        """Case-insensitive substring search over title and description."""
        ...

    # ==================== News Operations ====================

    @abstractmethod
    async def get_news_articles(self) -> list[NewsArticle]:
        """List news articles newest first."""
        ...

    @abstractmethod
    async def get_news_article_by_id(self, article_id: str) -> NewsArticle | None:
        """Get a news article by ID."""
        ...

    @abstractmethod
    async def create_news_article(self, data: NewsArticleCreate) -> NewsArticle:
        """Create a news article with a generated ID and timestamp."""
        ...

    @abstractmethod
    async def update_news_article(
        self,
        article_id: str,
        patch: NewsArticlePatch,
    ) -> NewsArticle | None:
        """Apply a partial update to a news article."""
        ...

    @abstractmethod
    async def delete_news_article(self, article_id: str) -> bool:
        """Delete a news article."""
        ...

    # ==================== Health Check ====================

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if storage is healthy."""
        ...
