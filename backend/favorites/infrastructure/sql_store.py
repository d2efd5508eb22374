"""SQL Favorites Store — FavoritesStore over an AsyncSession (PostgreSQL or SQLite).

Invariants:
    - Every public method commits before returning (one atomic unit per call)
    - add_favorite is a single INSERT ... ON CONFLICT (user_id, asset_id)
      WHERE deleted_at IS NULL DO NOTHING: concurrent adds of one pair yield
      exactly one row, never a read-then-write race
    - update/remove touch only the active row (WHERE deleted_at IS NULL), so a
      second remove of the same pair reports False
    - User/asset deletion relies on the FK cascade; no application-level locking
    - Counts use the same predicate as the page query and run before it

Design Decisions:
    - Dialect-specific insert picked at call time: the upsert syntax lives in
      sqlalchemy.dialects.postgresql / sqlalchemy.dialects.sqlite
    - Returns core.domain_types records, never ORM rows
    - Timestamps leave the store timezone-aware (UTC) on every dialect
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, func, select, text, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from favorites.core.domain_types import (
    AssetId, AssetKind, AssetRecord, FavoriteId, FavoriteRecord, PageSlice,
    UserId, UserRecord,
)
from favorites.core.errors import InvalidKindError
from favorites.models import Asset, Favorite, User

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on DateTime(timezone=True); values are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _user_record(row: User) -> UserRecord:
    return UserRecord(id=UserId(row.id), created_at=_as_utc(row.created_at))


def _asset_record(row: Asset) -> AssetRecord:
    return AssetRecord(
        id=AssetId(row.id),
        kind=AssetKind(row.kind),
        payload=row.payload,
        created_at=_as_utc(row.created_at),
    )


def _favorite_record(row: Favorite, asset: AssetRecord) -> FavoriteRecord:
    return FavoriteRecord(
        id=FavoriteId(row.id),
        user_id=UserId(row.user_id),
        asset=asset,
        description=row.description,
        added_at=_as_utc(row.added_at),
    )


class SqlFavoritesStore:
    """Production store bound to one request's AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _insert(self, entity):
        dialect = self.db.get_bind().dialect.name
        if dialect == "sqlite":
            return sqlite_insert(entity)
        return pg_insert(entity)

    # ─── Users ──────────────────────────────────────────────────

    async def create_user(self, user_id: UserId) -> UserRecord:
        stmt = (
            self._insert(User)
            .values(id=user_id, created_at=datetime.now(timezone.utc))
            .on_conflict_do_nothing(index_elements=["id"])
        )
        await self.db.execute(stmt)
        row = await self.db.scalar(select(User).where(User.id == user_id))
        await self.db.commit()
        return _user_record(row)

    async def user_exists(self, user_id: UserId) -> bool:
        found = await self.db.scalar(select(User.id).where(User.id == user_id))
        return found is not None

    async def list_users(self, limit: int, offset: int) -> PageSlice[UserRecord]:
        total = await self.db.scalar(select(func.count()).select_from(User))
        result = await self.db.execute(
            select(User)
            .order_by(User.created_at.desc())
            .limit(limit)
            .offset(offset),
        )
        return PageSlice(
            items=[_user_record(u) for u in result.scalars().all()],
            total=total or 0,
        )

    async def delete_user(self, user_id: UserId) -> bool:
        result = await self.db.execute(
            delete(User)
            .where(User.id == user_id)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        return result.rowcount > 0

    # ─── Assets ─────────────────────────────────────────────────

    async def create_asset(
        self, kind: AssetKind, payload: dict[str, Any],
    ) -> AssetRecord:
        parsed = AssetKind.parse(kind)
        if parsed is None:
            raise InvalidKindError(kind)
        asset = Asset(
            id=uuid.uuid4(), kind=parsed.value, payload=payload,
            created_at=datetime.now(timezone.utc),
        )
        self.db.add(asset)
        await self.db.commit()
        return _asset_record(asset)

    async def asset_exists(self, asset_id: AssetId) -> bool:
        found = await self.db.scalar(select(Asset.id).where(Asset.id == asset_id))
        return found is not None

    async def get_asset(self, asset_id: AssetId) -> AssetRecord | None:
        row = await self.db.scalar(select(Asset).where(Asset.id == asset_id))
        return _asset_record(row) if row else None

    async def list_assets(
        self, limit: int, offset: int, kind: AssetKind | None = None,
    ) -> PageSlice[AssetRecord]:
        conditions = []
        if kind is not None:
            conditions.append(Asset.kind == kind.value)
        total = await self.db.scalar(
            select(func.count()).select_from(Asset).where(*conditions),
        )
        result = await self.db.execute(
            select(Asset)
            .where(*conditions)
            .order_by(Asset.created_at.desc())
            .limit(limit)
            .offset(offset),
        )
        return PageSlice(
            items=[_asset_record(a) for a in result.scalars().all()],
            total=total or 0,
        )

    async def delete_asset(self, asset_id: AssetId) -> bool:
        result = await self.db.execute(
            delete(Asset)
            .where(Asset.id == asset_id)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        return result.rowcount > 0

    # ─── Favorites ──────────────────────────────────────────────

    async def add_favorite(
        self, user_id: UserId, asset_id: AssetId, description: str | None = None,
    ) -> FavoriteRecord | None:
        favorite_id = uuid.uuid4()
        added_at = datetime.now(timezone.utc)
        stmt = (
            self._insert(Favorite)
            .values(
                id=favorite_id, user_id=user_id, asset_id=asset_id,
                description=description, added_at=added_at,
            )
            .on_conflict_do_nothing(
                index_elements=["user_id", "asset_id"],
                index_where=Favorite.deleted_at.is_(None),
            )
            .returning(Favorite.id)
        )
        inserted = (await self.db.execute(stmt)).scalar_one_or_none()
        if inserted is None:
            await self.db.rollback()
            return None
        asset = await self.db.scalar(select(Asset).where(Asset.id == asset_id))
        await self.db.commit()
        return FavoriteRecord(
            id=FavoriteId(favorite_id),
            user_id=user_id,
            asset=_asset_record(asset),
            description=description,
            added_at=added_at,
        )

    def _active_favorites(self, *conditions):
        return (
            select(Favorite)
            .join(Favorite.asset)
            .options(contains_eager(Favorite.asset))
            .where(Favorite.deleted_at.is_(None), *conditions)
        )

    async def get_favorites(
        self, user_id: UserId, limit: int, offset: int,
        kind: AssetKind | None = None,
    ) -> PageSlice[FavoriteRecord]:
        conditions = [Favorite.user_id == user_id]
        if kind is not None:
            conditions.append(Asset.kind == kind.value)
        total = await self.db.scalar(
            select(func.count())
            .select_from(Favorite)
            .join(Asset, Favorite.asset_id == Asset.id)
            .where(Favorite.deleted_at.is_(None), *conditions),
        )
        result = await self.db.execute(
            self._active_favorites(*conditions)
            .order_by(Favorite.added_at.desc())
            .limit(limit)
            .offset(offset),
        )
        return PageSlice(
            items=[
                _favorite_record(f, _asset_record(f.asset))
                for f in result.scalars().unique().all()
            ],
            total=total or 0,
        )

    async def get_active_favorite(
        self, user_id: UserId, asset_id: AssetId,
    ) -> FavoriteRecord | None:
        result = await self.db.execute(
            self._active_favorites(
                Favorite.user_id == user_id, Favorite.asset_id == asset_id,
            ),
        )
        row = result.scalars().unique().one_or_none()
        if row is None:
            return None
        return _favorite_record(row, _asset_record(row.asset))

    async def update_favorite_description(
        self, user_id: UserId, asset_id: AssetId, description: str,
    ) -> bool:
        result = await self.db.execute(
            update(Favorite)
            .where(
                Favorite.user_id == user_id,
                Favorite.asset_id == asset_id,
                Favorite.deleted_at.is_(None),
            )
            .values(description=description)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        return result.rowcount > 0

    async def remove_favorite(self, user_id: UserId, asset_id: AssetId) -> bool:
        result = await self.db.execute(
            update(Favorite)
            .where(
                Favorite.user_id == user_id,
                Favorite.asset_id == asset_id,
                Favorite.deleted_at.is_(None),
            )
            .values(deleted_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        return result.rowcount > 0

    async def health_check(self) -> bool:
        try:
            await self.db.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Store health check failed: {e}")
            return False
