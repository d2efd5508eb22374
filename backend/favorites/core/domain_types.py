"""Domain Types — identity types, the asset kind enum, and immutable records.

Invariants:
    - UserId, AssetId, FavoriteId wrap UUIDs — never use bare UUID in domain logic
    - AssetKind is the closed set {chart, insight, audience}
    - Records are frozen: stores build them, nobody mutates them afterwards
    - Asset payload is an opaque dict; only its presence and kind are ever checked

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for AssetKind: serializes to JSON without custom encoders
    - Records are plain dataclasses, not ORM rows: both store implementations
      return the same shapes, so the service never touches SQLAlchemy objects
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Generic, NewType, TypeVar
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
AssetId = NewType("AssetId", UUID)
FavoriteId = NewType("FavoriteId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class AssetKind(str, Enum):
    """Asset kinds — maps to the `assets.kind` column."""
    CHART = "chart"
    INSIGHT = "insight"
    AUDIENCE = "audience"

    @classmethod
    def parse(cls, value: "str | AssetKind") -> "AssetKind | None":
        """Return the matching kind, or None when value is outside the set."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class UserRecord:
    id: UserId
    created_at: datetime


@dataclass(frozen=True)
class AssetRecord:
    id: AssetId
    kind: AssetKind
    payload: dict[str, Any]
    created_at: datetime


@dataclass(frozen=True)
class FavoriteRecord:
    """An active favorite joined with the asset it points to."""
    id: FavoriteId
    user_id: UserId
    asset: AssetRecord
    description: str | None
    added_at: datetime


T = TypeVar("T")


@dataclass(frozen=True)
class PageSlice(Generic[T]):
    """One page of rows plus the total matching the same filter."""
    items: list[T]
    total: int
