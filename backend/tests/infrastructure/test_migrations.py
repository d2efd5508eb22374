"""Alembic migrations — offline SQL for the favorites schema.

Tests:
    - DATABASE_URL in postgresql:// form is accepted (rewritten to asyncpg)
    - The initial revision renders the partial unique index and cascading FKs
"""

import io
from pathlib import Path

from alembic import command
from alembic.config import Config

ALEMBIC_DIR = Path(__file__).resolve().parents[2] / "alembic"


def _offline_sql(monkeypatch) -> str:
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost:5432/favorites")
    buf = io.StringIO()
    cfg = Config(output_buffer=buf)
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    command.upgrade(cfg, "head", sql=True)
    return buf.getvalue()


def test_upgrade_renders_partial_unique_index(monkeypatch):
    sql = _offline_sql(monkeypatch)
    assert "CREATE UNIQUE INDEX uq_favorites_user_asset_active" in sql
    assert "WHERE deleted_at IS NULL" in sql


def test_upgrade_renders_cascading_foreign_keys(monkeypatch):
    sql = _offline_sql(monkeypatch)
    assert sql.count("ON DELETE CASCADE") == 2
