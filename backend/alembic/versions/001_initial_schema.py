"""Initial schema — users, assets, favorites.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

Favorites are soft-deleted, so uniqueness of (user_id, asset_id) only holds
among rows with deleted_at IS NULL. Both foreign keys cascade on delete.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "assets",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("payload", JSONB, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "kind IN ('chart', 'insight', 'audience')", name="ck_assets_kind",
        ),
    )
    op.create_index("ix_assets_kind", "assets", ["kind"])

    op.create_table(
        "favorites",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id", UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "asset_id", UUID(as_uuid=True),
            sa.ForeignKey("assets.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "uq_favorites_user_asset_active", "favorites", ["user_id", "asset_id"],
        unique=True, postgresql_where=sa.text("deleted_at IS NULL"),
    )
    op.create_index(
        "ix_favorites_user_active_added", "favorites",
        ["user_id", sa.text("added_at DESC")],
        postgresql_where=sa.text("deleted_at IS NULL"),
    )
    op.create_index("ix_favorites_asset_id", "favorites", ["asset_id"])


def downgrade() -> None:
    op.drop_index("ix_favorites_asset_id", table_name="favorites")
    op.drop_index("ix_favorites_user_active_added", table_name="favorites")
    op.drop_index("uq_favorites_user_asset_active", table_name="favorites")
    op.drop_table("favorites")
    op.drop_index("ix_assets_kind", table_name="assets")
    op.drop_table("assets")
    op.drop_table("users")
