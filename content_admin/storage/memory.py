"""In-memory storage backend."""

from datetime import datetime
from uuid import uuid4

import structlog

from content_admin.models import (
    DEFAULT_CATEGORIES,
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
from content_admin.storage.base import StorageBackend

logger = structlog.get_logger()


def _new_id() -> str:
    return str(uuid4())


class InMemoryStorage(StorageBackend):
    """In-memory storage implementation.

    Each entity kind lives in its own dict keyed by ID. Nothing is persisted
    and there is no locking: every method reads and writes its mapping
    without awaiting in between, so concurrent callers see last-writer-wins.
    """

    def __init__(self, seed: bool = True) -> None:
        self._users: dict[str, User] = {}
        self._categories: dict[str, Category] = {}
        self._posts: dict[str, Post] = {}
        self._news_articles: dict[str, NewsArticle] = {}

        if seed:
            self._seed_categories()

    def _seed_categories(self) -> list[Category]:
        seeded = []
        for data in DEFAULT_CATEGORIES:
            category = Category(id=_new_id(), **data.model_dump())
            self._categories[category.id] = category
            seeded.append(category)
        logger.debug("Seeded default categories", count=len(seeded))
        return seeded

    # ==================== User Operations ====================

    async def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, data: UserCreate) -> User:
        user = User(id=_new_id(), **data.model_dump())
        self._users[user.id] = user
        logger.debug("Created user", user_id=user.id)
        return user

    # ==================== Category Operations ====================

    async def get_categories(self) -> list[Category]:
        return list(self._categories.values())

    async def get_category_by_id(self, category_id: str) -> Category | None:
        return self._categories.get(category_id)

    async def get_category_by_slug(self, slug: str) -> Category | None:
        for category in self._categories.values():
            if category.slug == slug:
                return category
        return None

    async def create_category(self, data: CategoryCreate) -> Category:
        category = Category(id=_new_id(), **data.model_dump())
        self._categories[category.id] = category
        logger.debug("Created category", category_id=category.id, slug=category.slug)
        return category

    async def update_category(self, category_id: str, patch: CategoryPatch) -> Category | None:
        existing = self._categories.get(category_id)
        if existing is None:
            return None

        updated = existing.model_copy(update=patch.changes(), deep=True)
        self._categories[category_id] = updated
        logger.debug("Updated category", category_id=category_id)
        return updated

    async def delete_category(self, category_id: str) -> bool:
        return self._categories.pop(category_id, None) is not None

    # ==================== Post Operations ====================

    async def get_posts(self, category_id: str | None = None) -> list[Post]:
        posts = list(self._posts.values())
        if category_id:
            return [p for p in posts if p.category_id == category_id]
        posts.sort(key=lambda x: x.created_at, reverse=True)
        return posts

    async def get_post_by_id(self, post_id: str) -> Post | None:
        return self._posts.get(post_id)

    async def create_post(self, data: PostCreate) -> Post:
        post = Post(
            id=_new_id(),
            created_at=datetime.utcnow(),
            download_count="0",
            **data.model_dump(),
        )
        self._posts[post.id] = post
        logger.debug("Created post", post_id=post.id, category_id=post.category_id)
        return post

    async def update_post(self, post_id: str, patch: PostPatch) -> Post | None:
        existing = self._posts.get(post_id)
        if existing is None:
            return None

        updated = existing.model_copy(update=patch.changes(), deep=True)
        self._posts[post_id] = updated
        logger.debug("Updated post", post_id=post_id, fields=sorted(patch.model_fields_set))
        return updated

    async def delete_post(self, post_id: str) -> bool:
        return self._posts.pop(post_id, None) is not None

    async def increment_download_count(self, post_id: str) -> None:
        post = self._posts.get(post_id)
        if post is None:
            return
        post.download_count = str(int(post.download_count or "0") + 1)

    async def search_posts(self, query: str) -> list[Post]:
        term = query.lower()
        return [
            p
            for p in self._posts.values()
            if term in p.title.lower() or term in p.description.lower()
        ]

    # ==================== News Operations ====================

    async def get_news_articles(self) -> list[NewsArticle]:
        articles = list(self._news_articles.values())
        articles.sort(key=lambda x: x.created_at, reverse=True)
        return articles

    async def get_news_article_by_id(self, article_id: str) -> NewsArticle | None:
        return self._news_articles.get(article_id)

    async def create_news_article(self, data: NewsArticleCreate) -> NewsArticle:
        article = NewsArticle(
            id=_new_id(),
            created_at=datetime.utcnow(),
            **data.model_dump(),
        )
        self._news_articles[article.id] = article
        logger.debug("Created news article", article_id=article.id)
        return article

    async def update_news_article(
        self,
        article_id: str,
        patch: NewsArticlePatch,
    ) -> NewsArticle | None:
        existing = self._news_articles.get(article_id)
        if existing is None:
            return None

        updated = existing.model_copy(update=patch.changes(), deep=True)
        self._news_articles[article_id] = updated
        logger.debug("Updated news article", article_id=article_id)
        return updated

    async def delete_news_article(self, article_id: str) -> bool:
        return self._news_articles.pop(article_id, None) is not None

    # ==================== Health Check ====================

    async def health_check(self) -> bool:
        return True

    # ==================== Development Helpers ====================

    async def clear_all(self, reseed: bool = False) -> None:
        """Clear all data, optionally restoring the default categories."""
        self._users.clear()
        self._categories.clear()
        self._posts.clear()
        self._news_articles.clear()
        if reseed:
            self._seed_categories()

    async def seed_default_categories(self) -> list[Category]:
        """Add the default categories, each with a fresh ID."""
        return self._seed_categories()
