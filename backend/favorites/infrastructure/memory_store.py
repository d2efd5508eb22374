"""In-Memory Favorites Store — FavoritesStore over plain dicts.

Invariants:
    - Same contract as SqlFavoritesStore, including soft delete, the
      active-only uniqueness rule and hard cascades on user/asset deletion
    - No await between a check and its write: every method runs to completion
      on the event loop without yielding, so each call is atomic
    - Favorite rows are never removed by remove_favorite, only stamped

Design Decisions:
    - Ties on added_at broken by insertion sequence so listings are stable
      even when the clock does not advance between two inserts
    - Shared process-wide instance when STORAGE_BACKEND=memory; tests build
      their own
"""

import itertools
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from favorites.core.domain_types import (
    AssetId, AssetKind, AssetRecord, FavoriteId, FavoriteRecord, PageSlice,
    UserId, UserRecord,
)
from favorites.core.errors import DatabaseError, InvalidKindError


@dataclass
class _FavoriteRow:
    id: FavoriteId
    user_id: UserId
    asset_id: AssetId
    description: str | None
    added_at: datetime
    seq: int
    deleted_at: datetime | None = None

    @property
    def active(self) -> bool:
        return self.deleted_at is None


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryFavoritesStore:
    """Dict-backed store for tests and database-less runs."""

    def __init__(self):
        self.users: dict[UserId, UserRecord] = {}
        self.assets: dict[AssetId, AssetRecord] = {}
        self.favorites: list[_FavoriteRow] = []
        self._seq = itertools.count()
        # creation order, newest last; used to order users/assets stably
        self._user_order: dict[UserId, int] = {}
        self._asset_order: dict[AssetId, int] = {}

    # ─── Users ──────────────────────────────────────────────────

    async def create_user(self, user_id: UserId) -> UserRecord:
        if user_id not in self.users:
            self.users[user_id] = UserRecord(id=user_id, created_at=_now())
            self._user_order[user_id] = next(self._seq)
        return self.users[user_id]

    async def user_exists(self, user_id: UserId) -> bool:
        return user_id in self.users

    async def list_users(self, limit: int, offset: int) -> PageSlice[UserRecord]:
        ordered = sorted(
            self.users.values(),
            key=lambda u: (u.created_at, self._user_order[u.id]),
            reverse=True,
        )
        return PageSlice(items=ordered[offset:offset + limit], total=len(ordered))

    async def delete_user(self, user_id: UserId) -> bool:
        if self.users.pop(user_id, None) is None:
            return False
        self._user_order.pop(user_id, None)
        self.favorites = [f for f in self.favorites if f.user_id != user_id]
        return True

    # ─── Assets ─────────────────────────────────────────────────

    async def create_asset(
        self, kind: AssetKind, payload: dict[str, Any],
    ) -> AssetRecord:
        parsed = AssetKind.parse(kind)
        if parsed is None:
            raise InvalidKindError(kind)
        asset = AssetRecord(
            id=AssetId(uuid.uuid4()), kind=parsed, payload=payload,
            created_at=_now(),
        )
        self.assets[asset.id] = asset
        self._asset_order[asset.id] = next(self._seq)
        return asset

    async def asset_exists(self, asset_id: AssetId) -> bool:
        return asset_id in self.assets

    async def get_asset(self, asset_id: AssetId) -> AssetRecord | None:
        return self.assets.get(asset_id)

    async def list_assets(
        self, limit: int, offset: int, kind: AssetKind | None = None,
    ) -> PageSlice[AssetRecord]:
        matching = [
            a for a in self.assets.values() if kind is None or a.kind == kind
        ]
        matching.sort(
            key=lambda a: (a.created_at, self._asset_order[a.id]), reverse=True,
        )
        return PageSlice(items=matching[offset:offset + limit], total=len(matching))

    async def delete_asset(self, asset_id: AssetId) -> bool:
        if self.assets.pop(asset_id, None) is None:
            return False
        self._asset_order.pop(asset_id, None)
        self.favorites = [f for f in self.favorites if f.asset_id != asset_id]
        return True

    # ─── Favorites ──────────────────────────────────────────────

    def _find_active(self, user_id: UserId, asset_id: AssetId) -> _FavoriteRow | None:
        for row in self.favorites:
            if row.active and row.user_id == user_id and row.asset_id == asset_id:
                return row
        return None

    def _record(self, row: _FavoriteRow) -> FavoriteRecord:
        return FavoriteRecord(
            id=row.id,
            user_id=row.user_id,
            asset=self.assets[row.asset_id],
            description=row.description,
            added_at=row.added_at,
        )

    async def add_favorite(
        self, user_id: UserId, asset_id: AssetId, description: str | None = None,
    ) -> FavoriteRecord | None:
        if user_id not in self.users or asset_id not in self.assets:
            raise DatabaseError("Foreign key constraint violated", "insert")
        if self._find_active(user_id, asset_id) is not None:
            return None
        row = _FavoriteRow(
            id=FavoriteId(uuid.uuid4()), user_id=user_id, asset_id=asset_id,
            description=description, added_at=_now(), seq=next(self._seq),
        )
        self.favorites.append(row)
        return self._record(row)

    async def get_favorites(
        self, user_id: UserId, limit: int, offset: int,
        kind: AssetKind | None = None,
    ) -> PageSlice[FavoriteRecord]:
        matching = [
            f for f in self.favorites
            if f.active and f.user_id == user_id
            and (kind is None or self.assets[f.asset_id].kind == kind)
        ]
        matching.sort(key=lambda f: (f.added_at, f.seq), reverse=True)
        return PageSlice(
            items=[self._record(f) for f in matching[offset:offset + limit]],
            total=len(matching),
        )

    async def get_active_favorite(
        self, user_id: UserId, asset_id: AssetId,
    ) -> FavoriteRecord | None:
        row = self._find_active(user_id, asset_id)
        return self._record(row) if row else None

    async def update_favorite_description(
        self, user_id: UserId, asset_id: AssetId, description: str,
    ) -> bool:
        row = self._find_active(user_id, asset_id)
        if row is None:
            return False
        row.description = description
        return True

    async def remove_favorite(self, user_id: UserId, asset_id: AssetId) -> bool:
        row = self._find_active(user_id, asset_id)
        if row is None:
            return False
        row.deleted_at = _now()
        return True

    async def health_check(self) -> bool:
        return True


# Singleton (initialized on startup when STORAGE_BACKEND=memory)
memory_store: InMemoryFavoritesStore | None = None


def init_memory_store() -> InMemoryFavoritesStore:
    global memory_store
    memory_store = InMemoryFavoritesStore()
    return memory_store
