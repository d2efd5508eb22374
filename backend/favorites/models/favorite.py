"""Favorite ORM — a user's (possibly soft-deleted) link to an asset.

Invariants:
    - At most one row per (user_id, asset_id) with deleted_at IS NULL
      (partial unique index, enforced by the database)
    - Soft delete only: removing a favorite stamps deleted_at, the row stays
    - Re-favoriting inserts a new row; old rows are history, never revived
    - user_id and asset_id cascade on delete of the referenced row

Design Decisions:
    - Partial index declared for both PostgreSQL and SQLite so tests exercise
      the same constraint as production
    - (user_id, added_at DESC) partial index: the listing query pattern is
      "active favorites of one user, newest first"
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Text, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from favorites.db.base import Base

ACTIVE_ROW = text("deleted_at IS NULL")


class Favorite(Base):
    """Favorite entity — links one user to one asset."""
    __tablename__ = "favorites"
    __table_args__ = (
        Index(
            "uq_favorites_user_asset_active", "user_id", "asset_id",
            unique=True,
            postgresql_where=ACTIVE_ROW,
            sqlite_where=ACTIVE_ROW,
        ),
        Index("ix_favorites_asset_id", "asset_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    asset_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("assets.id", ondelete="CASCADE"),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="favorites")
    asset: Mapped["Asset"] = relationship("Asset", back_populates="favorites")


Index(
    "ix_favorites_user_active_added",
    Favorite.user_id, Favorite.added_at.desc(),
    postgresql_where=ACTIVE_ROW,
    sqlite_where=ACTIVE_ROW,
)
