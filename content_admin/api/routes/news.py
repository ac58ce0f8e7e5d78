"""News article endpoints."""

import structlog
from fastapi import APIRouter, Request, status

from content_admin.api.dependencies import NewsArticleFromPath, StorageDep
from content_admin.api.forms import form_to_payload, parse_payload
from content_admin.core.exceptions import EntityNotFound
from content_admin.models import NewsArticle, NewsArticleCreate, NewsArticlePatch

logger = structlog.get_logger()

router = APIRouter(prefix="/api/news", tags=["News"])


@router.get("", response_model=list[NewsArticle])
async def list_news_articles(storage: StorageDep) -> list[NewsArticle]:
    """List news articles, newest first."""
    return await storage.get_news_articles()


@router.get("/{article_id}", response_model=NewsArticle)
async def get_news_article(article: NewsArticleFromPath) -> NewsArticle:
    """Get a specific news article."""
    return article


@router.post("", response_model=NewsArticle, status_code=status.HTTP_201_CREATED)
async def create_news_article(request: Request, storage: StorageDep) -> NewsArticle:
    """Create a news article from a form body."""
    payload = form_to_payload(await request.form())
    # An empty image field means "no image"
    if payload.get("image") == "":
        payload["image"] = None

    article = await storage.create_news_article(parse_payload(NewsArticleCreate, payload))
    logger.info("Created news article", article_id=article.id)
    return article


@router.put("/{article_id}", response_model=NewsArticle)
async def update_news_article(
    article_id: str,
    request: Request,
    storage: StorageDep,
) -> NewsArticle:
    """Update the fields present in the form body.

    An empty ``image`` field removes the image.
    """
    payload = form_to_payload(await request.form())
    if payload.get("image") == "":
        payload["image"] = None

    patch = parse_payload(NewsArticlePatch, payload)
    article = await storage.update_news_article(article_id, patch)
    if not article:
        raise EntityNotFound("news_article", article_id)

    logger.info("Updated news article", article_id=article_id)
    return article


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_news_article(article_id: str, storage: StorageDep) -> None:
    """Delete a news article."""
    if not await storage.delete_news_article(article_id):
        raise EntityNotFound("news_article", article_id)

    logger.info("Deleted news article", article_id=article_id)
