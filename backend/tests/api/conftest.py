"""API test fixtures — fresh FastAPI app + async client per test.

Invariants:
    - Every test gets its own app, hence its own freshly seeded catalog
    - httpx ASGITransport drives the app in-process (no lifespan, no socket)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from albums_api.config import Settings
from albums_api.main import create_app


@pytest.fixture
def app():
    return create_app(Settings(seed_catalog=True))


@pytest.fixture
def catalog(app):
    return app.state.catalog


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def empty_client():
    """Client for an app started without seed data."""
    app = create_app(Settings(seed_catalog=False))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
