"""Asset ORM — a chart, insight or audience definition.

Invariants:
    - kind is one of: chart, insight, audience (CHECK constraint)
    - payload is a non-null JSON object, never interpreted by the service
    - Deleting an asset removes every favorite pointing to it (FK cascade)

Design Decisions:
    - Single table with a JSON payload instead of one table per kind
    - JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, CheckConstraint, DateTime, Index, String
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from favorites.db.base import Base


class Asset(Base):
    """Asset entity — opaque payload tagged with its kind."""
    __tablename__ = "assets"
    __table_args__ = (
        CheckConstraint(
            "kind IN ('chart', 'insight', 'audience')", name="ck_assets_kind",
        ),
        Index("ix_assets_kind", "kind"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    kind: Mapped[str] = mapped_column(String(20), nullable=False)
    payload: Mapped[dict] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    favorites: Mapped[list["Favorite"]] = relationship(
        "Favorite", back_populates="asset", passive_deletes=True,
    )
