"""Favorite and asset schemas — boundary validation of request bodies.

Invariants:
    - FavoriteCreate.description is optional; blank collapses to None
    - FavoriteUpdate.description is required and non-blank after stripping
    - Descriptions are capped at 2000 chars
    - AssetCreate.type is not checked against the kind set here
"""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from favorites.schemas.asset import AssetCreate
from favorites.schemas.favorite import FavoriteCreate, FavoriteUpdate


# --- FavoriteCreate -----------------------------------------------------------

def test_create_description_defaults_to_none():
    assert FavoriteCreate(asset_id=uuid4()).description is None


def test_create_blank_description_becomes_none():
    assert FavoriteCreate(asset_id=uuid4(), description="   ").description is None


def test_create_description_is_stripped():
    body = FavoriteCreate(asset_id=uuid4(), description="  Q4 ")
    assert body.description == "Q4"


def test_create_rejects_malformed_asset_id():
    with pytest.raises(ValidationError):
        FavoriteCreate(asset_id="chart-1")


def test_create_description_max_length():
    with pytest.raises(ValidationError):
        FavoriteCreate(asset_id=uuid4(), description="x" * 2001)


# --- FavoriteUpdate -----------------------------------------------------------

def test_update_requires_description():
    with pytest.raises(ValidationError):
        FavoriteUpdate()


def test_update_rejects_whitespace():
    with pytest.raises(ValidationError):
        FavoriteUpdate(description=" \t ")


def test_update_strips():
    assert FavoriteUpdate(description=" new ").description == "new"


# --- AssetCreate --------------------------------------------------------------

def test_asset_create_leaves_kind_check_to_service():
    body = AssetCreate(type="table", data={"rows": 1})
    assert body.type == "table"


def test_asset_create_requires_object_data():
    with pytest.raises(ValidationError):
        AssetCreate(type="chart", data=[1, 2, 3])
