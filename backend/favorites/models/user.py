"""User ORM — identity only.

Invariants:
    - id is a UUID primary key supplied by the caller (create is idempotent on it)
    - Deleting a user removes its favorites through the FK cascade, not the ORM

Design Decisions:
    - passive_deletes=True: the database owns the cascade, the ORM never loads
      favorites just to delete them
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from favorites.db.base import Base


class User(Base):
    """User entity — owner of favorites."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    favorites: Mapped[list["Favorite"]] = relationship(
        "Favorite", back_populates="user", passive_deletes=True,
    )
