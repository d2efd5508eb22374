"""Assets API — create, fetch, list and delete.

Tests:
    - POST with a known type → 201, payload echoed unchanged
    - Unknown type → 400 INVALID_KIND; empty data → 400 MISSING_FIELD
    - GET ?type= filters; unknown filter → 400 INVALID_KIND
    - DELETE removes the asset from every user's favorites
"""

from uuid import uuid4


async def test_create_asset(client):
    payload = {"title": "Sales", "x_axis": "month", "data": [1, 2, 3]}
    resp = await client.post(
        "/api/v1/assets", json={"type": "chart", "data": payload},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["type"] == "chart"
    assert body["data"] == payload


async def test_create_asset_unknown_type(client):
    resp = await client.post(
        "/api/v1/assets", json={"type": "table", "data": {"rows": 1}},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_KIND"


async def test_create_asset_empty_data(client):
    resp = await client.post("/api/v1/assets", json={"type": "chart", "data": {}})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "MISSING_FIELD"


async def test_create_asset_missing_body_fields(client):
    resp = await client.post("/api/v1/assets", json={"type": "chart"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_get_asset(client, chart_id):
    resp = await client.get(f"/api/v1/assets/{chart_id}")
    assert resp.status_code == 200
    assert resp.json()["id"] == chart_id


async def test_get_unknown_asset(client):
    resp = await client.get(f"/api/v1/assets/{uuid4()}")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "ASSET_NOT_FOUND"


async def test_list_assets_type_filter(client, chart_id):
    await client.post(
        "/api/v1/assets", json={"type": "insight", "data": {"text": "t"}},
    )
    resp = await client.get("/api/v1/assets", params={"type": "chart"})
    body = resp.json()
    assert [a["id"] for a in body["assets"]] == [chart_id]
    assert body["pagination"]["total"] == 1

    everything = await client.get("/api/v1/assets", params={"type": ""})
    assert everything.json()["pagination"]["total"] == 2


async def test_list_assets_unknown_filter(client):
    resp = await client.get("/api/v1/assets", params={"type": "table"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_KIND"


async def test_delete_asset_removes_favorites(client, user_id, chart_id):
    await client.post(
        f"/api/v1/users/{user_id}/favorites", json={"asset_id": chart_id},
    )
    resp = await client.delete(f"/api/v1/assets/{chart_id}")
    assert resp.status_code == 204

    favorites = await client.get(f"/api/v1/users/{user_id}/favorites")
    assert favorites.json()["pagination"]["total"] == 0
    assert (await client.delete(f"/api/v1/assets/{chart_id}")).status_code == 404
