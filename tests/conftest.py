"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from content_admin.api.main import create_app
from content_admin.models import PostCreate
from content_admin.storage.memory import InMemoryStorage


@pytest.fixture
def storage():
    """Create in-memory storage with the default categories."""
    return InMemoryStorage()


@pytest.fixture
def empty_storage():
    """Create in-memory storage without seeded data."""
    return InMemoryStorage(seed=False)


@pytest.fixture
def app(storage):
    """Create test application backed by the storage fixture."""
    return create_app(storage=storage)


@pytest_asyncio.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def games_category(storage):
    """The seeded 'games' category."""
    return await storage.get_category_by_slug("games")


@pytest_asyncio.fixture
async def sample_post(storage, games_category):
    """Create a post with images and a download file."""
    return await storage.create_post(
        PostCreate(
            title="Space Shooter",
            description="Arcade game packed as a Zip archive",
            category_id=games_category.id,
            price="9.99",
            images=["https://cdn.test/shot1.png", "https://cdn.test/shot2.png"],
            download_files=[
                {"name": "shooter.zip", "url": "https://cdn.test/shooter.zip", "size": 2048},
            ],
        )
    )
