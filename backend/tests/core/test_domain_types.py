"""Domain Types — verifies identity types, AssetKind and records.

Tests:
    - NewType wrappers exist and are callable
    - AssetKind is exactly {chart, insight, audience}
    - AssetKind.parse returns None for unknown kinds instead of raising
    - Records are immutable
"""

import dataclasses
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from favorites.core.domain_types import (
    AssetId, AssetKind, AssetRecord, FavoriteId, UserId,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
    assert AssetId(uid) == uid
    assert FavoriteId(uid) == uid


def test_asset_kind_has_exactly_three_members():
    assert {k.value for k in AssetKind} == {"chart", "insight", "audience"}


def test_parse_accepts_strings_and_members():
    assert AssetKind.parse("chart") is AssetKind.CHART
    assert AssetKind.parse(AssetKind.AUDIENCE) is AssetKind.AUDIENCE


def test_parse_rejects_unknown_kind():
    assert AssetKind.parse("table") is None
    assert AssetKind.parse("CHART") is None


def test_records_are_frozen():
    asset = AssetRecord(
        id=AssetId(uuid4()), kind=AssetKind.CHART, payload={"title": "X"},
        created_at=datetime.now(timezone.utc),
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        asset.kind = AssetKind.INSIGHT
