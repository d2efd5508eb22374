"""API test fixtures — httpx client against the app with the store overridden.

Invariants:
    - ASGITransport does not run the lifespan, so get_store is always overridden
    - `client` serves from SqlFavoritesStore over the per-test SQLite database
    - `memory_client` serves from a fresh InMemoryFavoritesStore
"""

import pytest
from httpx import ASGITransport, AsyncClient

from favorites.api.dependencies import get_store
from favorites.infrastructure.memory_store import InMemoryFavoritesStore
from favorites.infrastructure.sql_store import SqlFavoritesStore
from favorites.main import app


@pytest.fixture
async def client(test_session_factory):
    async def override_store():
        async with test_session_factory() as session:
            yield SqlFavoritesStore(session)

    app.dependency_overrides[get_store] = override_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def memory_client():
    store = InMemoryFavoritesStore()

    async def override_store():
        yield store

    app.dependency_overrides[get_store] = override_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def user_id(client) -> str:
    resp = await client.post("/api/v1/users")
    return resp.json()["id"]


@pytest.fixture
async def chart_id(client) -> str:
    resp = await client.post(
        "/api/v1/assets", json={"type": "chart", "data": {"title": "X"}},
    )
    return resp.json()["id"]
