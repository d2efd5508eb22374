"""Favorites — a user's favorited assets.

Invariants:
    - POST conflicts (active favorite already present) → 409 ALREADY_FAVORITED
    - DELETE is a soft delete; a second DELETE of the same pair → 404 NOT_IN_FAVORITES
    - Re-adding after DELETE creates a new favorite with a new id

Design Decisions:
    - Favorites addressed by asset id under the user, not by favorite id:
      there is at most one active favorite per (user, asset)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from favorites.api.dependencies import get_favorites_service
from favorites.core.domain_types import AssetId, UserId
from favorites.schemas.favorite import (
    FavoriteCreate, FavoriteListResponse, FavoriteResponse, FavoriteUpdate,
)
from favorites.services.favorites_service import FavoritesService

router = APIRouter(prefix="/api/v1/users/{user_id}/favorites", tags=["favorites"])


@router.get("", response_model=FavoriteListResponse)
async def list_favorites(
    user_id: UUID,
    page: int = Query(1),
    limit: int | None = Query(None),
    kind: str | None = Query(None, alias="type"),
    service: FavoritesService = Depends(get_favorites_service),
):
    """List active favorites, most recently added first."""
    result = await service.list_favorites(
        UserId(user_id), page, limit or None, kind,
    )
    return FavoriteListResponse.from_page(result)


@router.post(
    "", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED,
)
async def add_favorite(
    user_id: UUID,
    body: FavoriteCreate,
    service: FavoritesService = Depends(get_favorites_service),
):
    favorite = await service.add_favorite(
        UserId(user_id), AssetId(body.asset_id), body.description,
    )
    return FavoriteResponse.from_record(favorite)


@router.put("/{asset_id}", response_model=FavoriteResponse)
async def update_favorite_description(
    user_id: UUID,
    asset_id: UUID,
    body: FavoriteUpdate,
    service: FavoritesService = Depends(get_favorites_service),
):
    favorite = await service.update_favorite_description(
        UserId(user_id), AssetId(asset_id), body.description,
    )
    return FavoriteResponse.from_record(favorite)


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite(
    user_id: UUID,
    asset_id: UUID,
    service: FavoritesService = Depends(get_favorites_service),
):
    await service.remove_favorite(UserId(user_id), AssetId(asset_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
