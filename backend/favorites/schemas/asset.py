"""Asset Schemas — request/response shapes for the assets API.

Invariants:
    - AssetCreate.type is a plain string here; the closed-set check happens in
      the service so an unknown kind surfaces as INVALID_KIND, not a generic
      validation error
    - data must be a JSON object; its contents are never inspected

Design Decisions:
    - Wire names `type`/`data` kept for clients; the domain calls them kind/payload
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from favorites.core.domain_types import AssetRecord
from favorites.core.pagination import Page
from favorites.schemas.pagination import PaginationResponse


class AssetCreate(BaseModel):
    """Asset creation — kind tag plus opaque payload."""
    type: str = Field(min_length=1, max_length=20)
    data: dict[str, Any]


class AssetResponse(BaseModel):
    id: UUID
    type: str
    data: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_record(cls, asset: AssetRecord) -> "AssetResponse":
        return cls(
            id=asset.id,
            type=asset.kind.value,
            data=asset.payload,
            created_at=asset.created_at,
        )


class AssetListResponse(BaseModel):
    assets: list[AssetResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: Page[AssetRecord]) -> "AssetListResponse":
        return cls(
            assets=[AssetResponse.from_record(a) for a in page.items],
            pagination=PaginationResponse.from_info(page.info),
        )
