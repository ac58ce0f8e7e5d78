"""Post endpoints.

Create and update take multipart form bodies. Images are URL strings and
download files are a JSON array of ``{name, url, size}`` objects.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Query, Request, status

from content_admin.api.dependencies import PostFromPath, StorageDep
from content_admin.api.forms import form_to_payload, parse_payload
from content_admin.core.exceptions import EntityNotFound
from content_admin.models import Post, PostCreate, PostPatch

logger = structlog.get_logger()

router = APIRouter(prefix="/api/posts", tags=["Posts"])

POST_LIST_FIELDS = frozenset({"images"})
POST_JSON_FIELDS = frozenset({"downloadFiles", "download_files"})


async def _read_post_form(request: Request) -> dict:
    form = await request.form()
    return form_to_payload(form, list_fields=POST_LIST_FIELDS, json_fields=POST_JSON_FIELDS)


@router.get("", response_model=list[Post])
async def list_posts(
    storage: StorageDep,
    category_id: Annotated[str | None, Query(alias="categoryId")] = None,
    search: str | None = None,
) -> list[Post]:
    """List posts, optionally filtered by category or a search term."""
    if search:
        posts = await storage.search_posts(search)
        if category_id:
            posts = [p for p in posts if p.category_id == category_id]
        return posts
    return await storage.get_posts(category_id)


@router.get("/{post_id}", response_model=Post)
async def get_post(post: PostFromPath) -> Post:
    """Get a specific post."""
    return post


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
async def create_post(request: Request, storage: StorageDep) -> Post:
    """Create a new post from a form body."""
    data = parse_payload(PostCreate, await _read_post_form(request))
    post = await storage.create_post(data)

    logger.info(
        "Created post",
        post_id=post.id,
        category_id=post.category_id,
        images=len(post.images),
        files=len(post.download_files),
    )
    return post


@router.put("/{post_id}", response_model=Post)
async def update_post(post_id: str, request: Request, storage: StorageDep) -> Post:
    """Update the fields present in the form body.

    Omitted ``images``/``downloadFiles`` are kept; sending an empty list
    clears them.
    """
    patch = parse_payload(PostPatch, await _read_post_form(request))
    post = await storage.update_post(post_id, patch)
    if not post:
        raise EntityNotFound("post", post_id)

    logger.info("Updated post", post_id=post_id, fields=sorted(patch.model_fields_set))
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, storage: StorageDep) -> None:
    """Delete a post."""
    if not await storage.delete_post(post_id):
        raise EntityNotFound("post", post_id)

    logger.info("Deleted post", post_id=post_id)


@router.post("/{post_id}/download", response_model=Post)
async def register_download(post: PostFromPath, storage: StorageDep) -> Post:
    """Count one download of a post."""
    await storage.increment_download_count(post.id)
    updated = await storage.get_post_by_id(post.id) or post

    logger.info("Registered download", post_id=post.id, download_count=updated.download_count)
    return updated
