#!/usr/bin/env python3
"""Script to load categories, posts and news articles into a running API.

The API keeps everything in memory, so this is how demo or exported content
is restored after a restart.

Expected format:
{
    "categories": [{"slug": "...", "name": "..."}],
    "posts": [
        {
            "title": "...", "description": "...", "price": "...",
            "categorySlug": "games",
            "images": ["https://..."],
            "downloadFiles": [{"name": "...", "url": "...", "size": 123}]
        }
    ],
    "news": [{"title": "...", "content": "...", "excerpt": "...", "image": "https://..."}]
}

Posts may use ``categoryId`` directly instead of ``categorySlug``.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import httpx


async def import_categories(client: httpx.AsyncClient, categories: list[dict[str, Any]]) -> int:
    """Create categories whose slug does not exist yet."""
    created = 0
    for category in categories:
        response = await client.get(f"/api/categories/slug/{category['slug']}")
        if response.status_code == 200:
            print(f"  Category '{category['slug']}' already exists")
            continue

        response = await client.post("/api/categories", json=category)
        response.raise_for_status()
        created += 1

    print(f"  Created {created} categories")
    return created


async def resolve_category_id(client: httpx.AsyncClient, post: dict[str, Any]) -> str:
    if post.get("categoryId"):
        return post["categoryId"]

    slug = post.get("categorySlug", "")
    response = await client.get(f"/api/categories/slug/{slug}")
    if response.status_code != 200:
        raise ValueError(f"Unknown category slug: {slug!r}")
    return response.json()["id"]


def post_form(post: dict[str, Any], category_id: str) -> dict[str, str]:
    """Flatten a post document into form fields."""
    return {
        "title": post["title"],
        "description": post["description"],
        "categoryId": category_id,
        "price": str(post.get("price", "0")),
        "images": json.dumps(post.get("images", [])),
        "downloadFiles": json.dumps(post.get("downloadFiles", [])),
    }


async def import_posts(client: httpx.AsyncClient, posts: list[dict[str, Any]]) -> int:
    created = 0
    for post in posts:
        category_id = await resolve_category_id(client, post)
        response = await client.post("/api/posts", data=post_form(post, category_id))
        response.raise_for_status()
        created += 1

    print(f"  Created {created} posts")
    return created


async def import_news(client: httpx.AsyncClient, articles: list[dict[str, Any]]) -> int:
    created = 0
    for article in articles:
        form = {key: article.get(key) or "" for key in ("title", "content", "excerpt", "image")}
        response = await client.post("/api/news", data=form)
        response.raise_for_status()
        created += 1

    print(f"  Created {created} news articles")
    return created


async def import_document(client: httpx.AsyncClient, document: dict[str, Any]) -> dict[str, int]:
    """Import every section of ``document`` and return per-section counts."""
    return {
        "categories": await import_categories(client, document.get("categories", [])),
        "posts": await import_posts(client, document.get("posts", [])),
        "news": await import_news(client, document.get("news", [])),
    }


async def main():
    parser = argparse.ArgumentParser(description="Import content into the admin API")
    parser.add_argument("path", help="JSON file to import")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")

    args = parser.parse_args()

    path = Path(args.path)

    if not path.is_file():
        print(f"Error: File does not exist: {path}")
        sys.exit(1)

    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)

    print(f"Importing {path} into {args.base_url}")

    async with httpx.AsyncClient(base_url=args.base_url, timeout=30.0) as client:
        try:
            counts = await import_document(client, document)
        except (httpx.HTTPError, ValueError) as e:
            print(f"Error: {e}")
            sys.exit(1)

    print(f"\nImported: {counts}")


if __name__ == "__main__":
    asyncio.run(main())
