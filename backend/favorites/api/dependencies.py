"""API Dependencies — per-request store and service wiring.

Invariants:
    - One FavoritesStore per request; the SQL store owns that request's session
    - STORAGE_BACKEND=memory serves every request from the process-wide
      in-memory store initialized in the lifespan
    - Services are built per request and hold no state of their own

Design Decisions:
    - db_manager / memory_store read through their modules at call time:
      both singletons are assigned on startup, after this module is imported
"""

from typing import AsyncGenerator

from fastapi import Depends

import favorites.infrastructure.database as db_module
import favorites.infrastructure.memory_store as memory_module
from favorites.config import get_settings
from favorites.core.repository_protocols import FavoritesStore
from favorites.infrastructure.sql_store import SqlFavoritesStore
from favorites.services.favorites_service import FavoritesService


async def get_store() -> AsyncGenerator[FavoritesStore, None]:
    """FastAPI dependency yielding the configured store."""
    if memory_module.memory_store is not None:
        yield memory_module.memory_store
        return
    if not db_module.db_manager:
        raise RuntimeError("Database not initialized")
    async with db_module.db_manager.session() as db:
        yield SqlFavoritesStore(db)


def get_favorites_service(
    store: FavoritesStore = Depends(get_store),
) -> FavoritesService:
    settings = get_settings()
    return FavoritesService(
        store,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
