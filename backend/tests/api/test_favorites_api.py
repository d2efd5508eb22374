"""Favorites API — the favorite → unfavorite → favorite lifecycle over HTTP.

Tests:
    - POST → 201 with the embedded asset; repeat → 409 ALREADY_FAVORITED
    - DELETE → 204; repeat → 404 NOT_IN_FAVORITES
    - Re-adding after DELETE → 201 with a new favorite id
    - PUT updates the description; blank description → 400
    - Unknown user/asset → 404 with the matching code
    - Deleting the user makes the listing 404
    - added_at renders identically on POST, GET and PUT
"""

from uuid import uuid4


def _favorites_url(user_id: str) -> str:
    return f"/api/v1/users/{user_id}/favorites"


async def test_favorite_lifecycle(client, user_id, chart_id):
    url = _favorites_url(user_id)

    added = await client.post(url, json={"asset_id": chart_id})
    assert added.status_code == 201
    first = added.json()
    assert first["asset"]["id"] == chart_id
    assert first["asset"]["data"] == {"title": "X"}
    assert first["description"] is None

    listing = (await client.get(url, params={"page": 1, "limit": 20})).json()
    assert len(listing["favorites"]) == 1
    assert listing["pagination"]["total"] == 1
    assert listing["pagination"]["has_next"] is False

    assert (await client.delete(f"{url}/{chart_id}")).status_code == 204
    assert (await client.get(url)).json()["pagination"]["total"] == 0

    again = await client.post(url, json={"asset_id": chart_id})
    assert again.status_code == 201
    assert again.json()["id"] != first["id"]


async def test_duplicate_favorite_conflicts(client, user_id, chart_id):
    url = _favorites_url(user_id)
    await client.post(url, json={"asset_id": chart_id})
    resp = await client.post(url, json={"asset_id": chart_id})
    assert resp.status_code == 409
    error = resp.json()["error"]
    assert error["code"] == "ALREADY_FAVORITED"
    assert error["context"] == {"user_id": user_id, "asset_id": chart_id}


async def test_remove_twice(client, user_id, chart_id):
    url = _favorites_url(user_id)
    await client.post(url, json={"asset_id": chart_id})
    await client.delete(f"{url}/{chart_id}")
    resp = await client.delete(f"{url}/{chart_id}")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_IN_FAVORITES"


async def test_add_favorite_unknown_user(client, chart_id):
    resp = await client.post(
        _favorites_url(str(uuid4())), json={"asset_id": chart_id},
    )
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "USER_NOT_FOUND"


async def test_add_favorite_unknown_asset(client, user_id):
    resp = await client.post(
        _favorites_url(user_id), json={"asset_id": str(uuid4())},
    )
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "ASSET_NOT_FOUND"


async def test_add_favorite_with_description(client, user_id, chart_id):
    resp = await client.post(
        _favorites_url(user_id),
        json={"asset_id": chart_id, "description": "  Q4 numbers  "},
    )
    assert resp.json()["description"] == "Q4 numbers"


async def test_update_description(client, user_id, chart_id):
    url = _favorites_url(user_id)
    added = (await client.post(url, json={"asset_id": chart_id})).json()
    resp = await client.put(f"{url}/{chart_id}", json={"description": "renamed"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["description"] == "renamed"
    assert body["id"] == added["id"]


async def test_update_description_not_favorited(client, user_id, chart_id):
    resp = await client.put(
        f"{_favorites_url(user_id)}/{chart_id}", json={"description": "x"},
    )
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_IN_FAVORITES"


async def test_update_description_blank(client, user_id, chart_id):
    url = _favorites_url(user_id)
    await client.post(url, json={"asset_id": chart_id})
    resp = await client.put(f"{url}/{chart_id}", json={"description": "   "})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_list_favorites_type_filter(client, user_id, chart_id):
    audience = await client.post(
        "/api/v1/assets", json={"type": "audience", "data": {"country": "GR"}},
    )
    url = _favorites_url(user_id)
    await client.post(url, json={"asset_id": chart_id})
    await client.post(url, json={"asset_id": audience.json()["id"]})

    resp = await client.get(url, params={"type": "audience"})
    body = resp.json()
    assert [f["asset"]["type"] for f in body["favorites"]] == ["audience"]
    assert body["pagination"]["total"] == 1


async def test_delete_user_then_list(client, user_id, chart_id):
    url = _favorites_url(user_id)
    await client.post(url, json={"asset_id": chart_id})
    await client.delete(f"/api/v1/users/{user_id}")
    resp = await client.get(url)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "USER_NOT_FOUND"


async def test_memory_backend_serves_same_contract(memory_client):
    user_id = (await memory_client.post("/api/v1/users")).json()["id"]
    asset = await memory_client.post(
        "/api/v1/assets", json={"type": "insight", "data": {"text": "t"}},
    )
    url = _favorites_url(user_id)
    payload = {"asset_id": asset.json()["id"]}

    assert (await memory_client.post(url, json=payload)).status_code == 201
    assert (await memory_client.post(url, json=payload)).status_code == 409


async def test_added_at_serialized_the_same_everywhere(client, user_id, chart_id):
    url = _favorites_url(user_id)
    added = (await client.post(url, json={"asset_id": chart_id})).json()
    listed = (await client.get(url)).json()["favorites"][0]
    updated = (
        await client.put(f"{url}/{chart_id}", json={"description": "d"})
    ).json()
    assert listed["added_at"] == added["added_at"] == updated["added_at"]
