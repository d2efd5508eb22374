"""Boundary Protocols — the storage contract between domain logic and persistence.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Every method is one atomic unit: it either fully applies or raises
    - Absence is signalled with False/None, never with an exception
    - add_favorite returns None on an active-duplicate conflict (a single
      conditional insert, never read-then-write)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Two implementations: SqlFavoritesStore (production) and
      InMemoryFavoritesStore (tests, local runs without a database)
"""

from typing import Any, Protocol

from favorites.core.domain_types import (
    AssetId, AssetKind, AssetRecord, FavoriteRecord, PageSlice,
    UserId, UserRecord,
)


class FavoritesStore(Protocol):
    """Contract for users, assets and favorites persistence."""

    # users
    async def create_user(self, user_id: UserId) -> UserRecord: ...
    async def user_exists(self, user_id: UserId) -> bool: ...
    async def list_users(self, limit: int, offset: int) -> PageSlice[UserRecord]: ...
    async def delete_user(self, user_id: UserId) -> bool: ...

    # assets
    async def create_asset(
        self, kind: AssetKind, payload: dict[str, Any],
    ) -> AssetRecord: ...
    async def asset_exists(self, asset_id: AssetId) -> bool: ...
    async def get_asset(self, asset_id: AssetId) -> AssetRecord | None: ...
    async def list_assets(
        self, limit: int, offset: int, kind: AssetKind | None = None,
    ) -> PageSlice[AssetRecord]: ...
    async def delete_asset(self, asset_id: AssetId) -> bool: ...

    # favorites
    async def add_favorite(
        self, user_id: UserId, asset_id: AssetId, description: str | None = None,
    ) -> FavoriteRecord | None: ...
    async def get_favorites(
        self, user_id: UserId, limit: int, offset: int,
        kind: AssetKind | None = None,
    ) -> PageSlice[FavoriteRecord]: ...
    async def get_active_favorite(
        self, user_id: UserId, asset_id: AssetId,
    ) -> FavoriteRecord | None: ...
    async def update_favorite_description(
        self, user_id: UserId, asset_id: AssetId, description: str,
    ) -> bool: ...
    async def remove_favorite(self, user_id: UserId, asset_id: AssetId) -> bool: ...

    async def health_check(self) -> bool: ...
