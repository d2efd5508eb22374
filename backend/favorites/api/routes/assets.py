"""Assets — create, fetch, list and delete charts, insights and audiences.

Invariants:
    - Payloads pass through unchanged; only the kind tag is checked
    - `type` query filter: empty means no filter, unknown kind → 400 INVALID_KIND
    - `limit=0` means the default page size, like an absent limit
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from favorites.api.dependencies import get_favorites_service
from favorites.core.domain_types import AssetId
from favorites.schemas.asset import AssetCreate, AssetListResponse, AssetResponse
from favorites.services.favorites_service import FavoritesService

router = APIRouter(prefix="/api/v1/assets", tags=["assets"])


@router.post(
    "", response_model=AssetResponse, status_code=status.HTTP_201_CREATED,
)
async def create_asset(
    body: AssetCreate,
    service: FavoritesService = Depends(get_favorites_service),
):
    asset = await service.create_asset(body.type, body.data)
    return AssetResponse.from_record(asset)


@router.get("", response_model=AssetListResponse)
async def list_assets(
    page: int = Query(1),
    limit: int | None = Query(None),
    kind: str | None = Query(None, alias="type"),
    service: FavoritesService = Depends(get_favorites_service),
):
    """List assets newest first, optionally filtered by type."""
    return AssetListResponse.from_page(
        await service.list_assets(page, limit or None, kind),
    )


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: UUID,
    service: FavoritesService = Depends(get_favorites_service),
):
    return AssetResponse.from_record(await service.get_asset(AssetId(asset_id)))


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_asset(
    asset_id: UUID,
    service: FavoritesService = Depends(get_favorites_service),
):
    """Delete an asset; every favorite pointing to it goes with it."""
    await service.delete_asset(AssetId(asset_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
