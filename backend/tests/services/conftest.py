"""Service test fixtures — FavoritesService over a fresh InMemoryFavoritesStore.

Invariants:
    - Every test gets its own store (no state shared between tests)
    - user/chart fixtures are created through the service, not the store
"""

import pytest

from favorites.core.domain_types import AssetKind
from favorites.infrastructure.memory_store import InMemoryFavoritesStore
from favorites.services.favorites_service import FavoritesService


@pytest.fixture
def store():
    return InMemoryFavoritesStore()


@pytest.fixture
def service(store):
    return FavoritesService(store)


@pytest.fixture
async def user(service):
    return await service.create_user()


@pytest.fixture
async def chart(service):
    return await service.create_asset(AssetKind.CHART, {"title": "X"})
