"""Favorites Service — validation ordering, business rules and pagination over a store.

Invariants:
    - Stateless between calls: all state lives in the FavoritesStore
    - add_favorite checks, in order: user exists, asset exists, then the atomic
      insert (conflict → AlreadyFavoritedError)
    - Every favorite operation checks the user first (UserNotFoundError)
    - Listings clamp page/page_size instead of rejecting them
    - Failures are raised as FavoritesError subclasses; callers branch on .kind

Design Decisions:
    - Store injected through the constructor: SqlFavoritesStore in production,
      InMemoryFavoritesStore in tests
    - Removal and description updates go straight to the conditional update;
      its rowcount is the existence check, so no read-then-write race
"""

import logging
import uuid
from typing import Any

from favorites.core.domain_types import (
    AssetId, AssetKind, AssetRecord, FavoriteRecord, UserId, UserRecord,
)
from favorites.core.errors import (
    AlreadyFavoritedError, AssetNotFoundError, InvalidKindError,
    MissingFieldError, NotInFavoritesError, UserNotFoundError,
)
from favorites.core.pagination import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page, clamp_page_request, page_info,
)
from favorites.core.repository_protocols import FavoritesStore

logger = logging.getLogger(__name__)


def parse_kind_filter(kind: "str | AssetKind | None") -> AssetKind | None:
    """Empty/None means no filter; anything else must be a known kind."""
    if kind is None or kind == "":
        return None
    parsed = AssetKind.parse(kind)
    if parsed is None:
        raise InvalidKindError(kind)
    return parsed


class FavoritesService:
    """Domain operations for users, assets and favorites."""

    def __init__(
        self,
        store: FavoritesStore,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self.store = store
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def _page_request(self, page: int | None, page_size: int | None):
        return clamp_page_request(
            page, page_size,
            default_page_size=self.default_page_size,
            max_page_size=self.max_page_size,
        )

    async def _require_user(self, user_id: UserId) -> None:
        if not await self.store.user_exists(user_id):
            raise UserNotFoundError(user_id)

    # ─── Users ──────────────────────────────────────────────────

    async def create_user(self, user_id: UserId | None = None) -> UserRecord:
        """Create a user; an existing id is returned unchanged."""
        user = await self.store.create_user(user_id or UserId(uuid.uuid4()))
        logger.info("User created", extra={"user_id": user.id})
        return user

    async def list_users(
        self, page: int | None = None, page_size: int | None = None,
    ) -> Page[UserRecord]:
        request = self._page_request(page, page_size)
        result = await self.store.list_users(request.page_size, request.offset)
        return Page(items=result.items, info=page_info(request, result.total))

    async def delete_user(self, user_id: UserId) -> None:
        await self._require_user(user_id)
        if not await self.store.delete_user(user_id):
            # removed by a concurrent request between the check and the delete
            raise UserNotFoundError(user_id)
        logger.info("User deleted", extra={"user_id": user_id})

    # ─── Assets ─────────────────────────────────────────────────

    async def create_asset(
        self, kind: "str | AssetKind", payload: dict[str, Any] | None,
    ) -> AssetRecord:
        parsed = AssetKind.parse(kind) if kind else None
        if parsed is None:
            raise InvalidKindError(kind)
        if not payload:
            raise MissingFieldError("data")
        asset = await self.store.create_asset(parsed, payload)
        logger.info(
            "Asset created", extra={"asset_id": asset.id, "kind": parsed.value},
        )
        return asset

    async def get_asset(self, asset_id: AssetId) -> AssetRecord:
        asset = await self.store.get_asset(asset_id)
        if asset is None:
            raise AssetNotFoundError(asset_id)
        return asset

    async def list_assets(
        self,
        page: int | None = None,
        page_size: int | None = None,
        kind: "str | AssetKind | None" = None,
    ) -> Page[AssetRecord]:
        kind_filter = parse_kind_filter(kind)
        request = self._page_request(page, page_size)
        result = await self.store.list_assets(
            request.page_size, request.offset, kind_filter,
        )
        return Page(items=result.items, info=page_info(request, result.total))

    async def delete_asset(self, asset_id: AssetId) -> None:
        if not await self.store.asset_exists(asset_id):
            raise AssetNotFoundError(asset_id)
        if not await self.store.delete_asset(asset_id):
            raise AssetNotFoundError(asset_id)
        logger.info("Asset deleted", extra={"asset_id": asset_id})

    # ─── Favorites ──────────────────────────────────────────────

    async def add_favorite(
        self, user_id: UserId, asset_id: AssetId, description: str | None = None,
    ) -> FavoriteRecord:
        await self._require_user(user_id)
        if not await self.store.asset_exists(asset_id):
            raise AssetNotFoundError(asset_id)
        favorite = await self.store.add_favorite(user_id, asset_id, description)
        if favorite is None:
            logger.warning(
                "Favorite already exists",
                extra={"user_id": user_id, "asset_id": asset_id},
            )
            raise AlreadyFavoritedError(user_id, asset_id)
        logger.info(
            "Favorite added",
            extra={
                "user_id": user_id, "asset_id": asset_id,
                "favorite_id": favorite.id,
            },
        )
        return favorite

    async def list_favorites(
        self,
        user_id: UserId,
        page: int | None = None,
        page_size: int | None = None,
        kind: "str | AssetKind | None" = None,
    ) -> Page[FavoriteRecord]:
        await self._require_user(user_id)
        kind_filter = parse_kind_filter(kind)
        request = self._page_request(page, page_size)
        result = await self.store.get_favorites(
            user_id, request.page_size, request.offset, kind_filter,
        )
        return Page(items=result.items, info=page_info(request, result.total))

    async def update_favorite_description(
        self, user_id: UserId, asset_id: AssetId, description: str,
    ) -> FavoriteRecord:
        await self._require_user(user_id)
        updated = await self.store.update_favorite_description(
            user_id, asset_id, description,
        )
        if not updated:
            raise NotInFavoritesError(user_id, asset_id)
        favorite = await self.store.get_active_favorite(user_id, asset_id)
        if favorite is None:
            # removed concurrently right after the update
            raise NotInFavoritesError(user_id, asset_id)
        logger.info(
            "Favorite description updated",
            extra={"user_id": user_id, "asset_id": asset_id},
        )
        return favorite

    async def remove_favorite(self, user_id: UserId, asset_id: AssetId) -> None:
        await self._require_user(user_id)
        if not await self.store.remove_favorite(user_id, asset_id):
            raise NotInFavoritesError(user_id, asset_id)
        logger.info(
            "Favorite removed",
            extra={"user_id": user_id, "asset_id": asset_id},
        )
