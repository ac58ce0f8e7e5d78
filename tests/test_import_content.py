"""Tests for the content import script."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "import_content.py"


@pytest.fixture(scope="module")
def importer():
    spec = importlib.util.spec_from_file_location("import_content", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.asyncio
async def test_import_document(importer, client, storage):
    document = {
        "categories": [
            {"slug": "games", "name": "Games"},
            {"slug": "plugins", "name": "Plugins"},
        ],
        "posts": [
            {
                "title": "Reverb",
                "description": "Audio plugin",
                "price": 12,
                "categorySlug": "plugins",
                "images": ["https://cdn.test/reverb.png"],
                "downloadFiles": [{"name": "reverb.zip", "url": "https://cdn.test/r.zip", "size": 5}],
            }
        ],
        "news": [{"title": "Hello", "content": "World", "excerpt": "Hi"}],
    }

    counts = await importer.import_document(client, document)
    assert counts == {"categories": 1, "posts": 1, "news": 1}

    plugins = await storage.get_category_by_slug("plugins")
    posts = await storage.get_posts(plugins.id)
    assert len(posts) == 1
    assert posts[0].price == "12"
    assert posts[0].images == ["https://cdn.test/reverb.png"]
    assert posts[0].download_files[0].size == 5

    articles = await storage.get_news_articles()
    assert [a.title for a in articles] == ["Hello"]
    assert articles[0].image is None


@pytest.mark.asyncio
async def test_import_unknown_category_slug(importer, client):
    with pytest.raises(ValueError):
        await importer.import_posts(
            client,
            [{"title": "t", "description": "d", "categorySlug": "nope"}],
        )
