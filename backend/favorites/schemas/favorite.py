"""Favorite Schemas — request/response shapes for a user's favorites.

Invariants:
    - FavoriteCreate.description: optional, stripped, empty → None (no override)
    - FavoriteUpdate.description: required, 1-2000 chars after stripping
    - Responses always embed the full asset

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from favorites.core.domain_types import FavoriteRecord
from favorites.core.pagination import Page
from favorites.schemas.asset import AssetResponse
from favorites.schemas.pagination import PaginationResponse


class FavoriteCreate(BaseModel):
    """Add an asset to a user's favorites."""
    asset_id: UUID
    description: str | None = Field(None, max_length=2000)

    @field_validator("description")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class FavoriteUpdate(BaseModel):
    """Replace the description override of an active favorite."""
    description: str = Field(max_length=2000)

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("description cannot be empty or whitespace")
        return v


class FavoriteResponse(BaseModel):
    id: UUID
    user_id: UUID
    asset: AssetResponse
    description: str | None
    added_at: datetime

    @classmethod
    def from_record(cls, favorite: FavoriteRecord) -> "FavoriteResponse":
        return cls(
            id=favorite.id,
            user_id=favorite.user_id,
            asset=AssetResponse.from_record(favorite.asset),
            description=favorite.description,
            added_at=favorite.added_at,
        )


class FavoriteListResponse(BaseModel):
    favorites: list[FavoriteResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: Page[FavoriteRecord]) -> "FavoriteListResponse":
        return cls(
            favorites=[FavoriteResponse.from_record(f) for f in page.items],
            pagination=PaginationResponse.from_info(page.info),
        )
