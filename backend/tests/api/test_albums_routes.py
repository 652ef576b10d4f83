"""Album Routes — HTTP contract for /albums.

Tests cover:
    - GET /albums returns the seed in order (and [] when unseeded)
    - POST /albums 201 echo, then GET /albums/{id} returns the same object
    - POST duplicate → 409, empty id/title or negative price → 400, no mutation
    - GET unknown id → 404 with error envelope, count unaffected
    - concurrent POSTs with distinct ids all land
"""

import asyncio

SEED = [
    {"id": "1", "title": "Blue Train", "artist": "John Coltrane", "price": 56.99},
    {"id": "2", "title": "Jeru", "artist": "Gerry Mulligan", "price": 17.99},
    {
        "id": "3", "title": "Sarah Vaughan and Clifford Brown",
        "artist": "Sarah Vaughan", "price": 39.99,
    },
]
KIND_OF_BLUE = {"id": "4", "title": "Kind of Blue", "artist": "Miles Davis", "price": 49.99}


# ─── GET /albums ─────────────────────────────────────────────────

async def test_list_returns_seed_albums_in_order(client):
    res = await client.get("/albums")
    assert res.status_code == 200
    assert res.json() == SEED


async def test_list_on_empty_catalog_returns_empty_array(empty_client):
    res = await empty_client.get("/albums")
    assert res.status_code == 200
    assert res.json() == []


# ─── Create → get → duplicate scenario ───────────────────────────

async def test_kind_of_blue_scenario(client):
    res = await client.post("/albums", json=KIND_OF_BLUE)
    assert res.status_code == 201
    assert res.json() == KIND_OF_BLUE

    res = await client.get("/albums/4")
    assert res.status_code == 200
    assert res.json() == KIND_OF_BLUE

    res = await client.post("/albums", json=KIND_OF_BLUE)
    assert res.status_code == 409
    body = res.json()["error"]
    assert body["status"] == "ALREADY_EXISTS"
    assert body["context"]["album_id"] == "4"


async def test_created_album_appended_to_listing(client):
    await client.post("/albums", json=KIND_OF_BLUE)
    res = await client.get("/albums")
    assert res.json() == SEED + [KIND_OF_BLUE]


async def test_create_without_artist_omits_it_and_defaults_price(client):
    res = await client.post("/albums", json={"id": "9", "title": "Various"})
    assert res.status_code == 201
    assert res.json() == {"id": "9", "title": "Various", "price": 0.0}


async def test_duplicate_seed_id_never_mutates(client, catalog):
    res = await client.post(
        "/albums", json={"id": "1", "title": "Impostor", "price": 1.0},
    )
    assert res.status_code == 409
    assert catalog.count() == 3
    assert catalog.find_by_id("1").title == "Blue Train"


# ─── Bad input ───────────────────────────────────────────────────

async def test_empty_id_rejected_with_400(client, catalog):
    res = await client.post("/albums", json={**KIND_OF_BLUE, "id": ""})
    assert res.status_code == 400
    body = res.json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["status"] == "INVALID_ARGUMENT"
    assert body["context"]["details"][0]["field"] == "id"
    assert catalog.count() == 3


async def test_empty_title_rejected_with_400(client, catalog):
    res = await client.post("/albums", json={**KIND_OF_BLUE, "title": ""})
    assert res.status_code == 400
    assert catalog.count() == 3


async def test_missing_title_rejected_with_400(client, catalog):
    res = await client.post("/albums", json={"id": "4"})
    assert res.status_code == 400
    assert catalog.count() == 3


async def test_negative_price_rejected_with_400(client, catalog):
    res = await client.post("/albums", json={**KIND_OF_BLUE, "price": -0.5})
    assert res.status_code == 400
    assert res.json()["error"]["context"]["details"][0]["field"] == "price"
    assert catalog.count() == 3


async def test_malformed_json_rejected_with_400(client):
    res = await client.post(
        "/albums", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400


# ─── GET /albums/{id} ────────────────────────────────────────────

async def test_get_seed_album_by_id(client):
    res = await client.get("/albums/2")
    assert res.status_code == 200
    assert res.json() == SEED[1]


async def test_get_unknown_id_returns_404(client, catalog):
    res = await client.get("/albums/nope")
    assert res.status_code == 404
    body = res.json()["error"]
    assert body["status"] == "NOT_FOUND"
    assert body["message"] == "Album 'nope' not found"
    assert catalog.count() == 3


# ─── Concurrency ─────────────────────────────────────────────────

async def test_concurrent_distinct_creates_all_land(empty_client):
    n = 25
    responses = await asyncio.gather(*[
        empty_client.post("/albums", json={"id": f"c{i}", "title": f"T{i}"})
        for i in range(n)
    ])
    assert all(r.status_code == 201 for r in responses)
    listing = (await empty_client.get("/albums")).json()
    ids = [a["id"] for a in listing]
    assert len(ids) == n
    assert len(set(ids)) == n


async def test_concurrent_same_id_creates_succeed_once(empty_client):
    responses = await asyncio.gather(*[
        empty_client.post("/albums", json={"id": "dup", "title": "T"})
        for _ in range(10)
    ])
    codes = sorted(r.status_code for r in responses)
    assert codes == [201] + [409] * 9


async def test_out_of_range_price_rejected_with_400(client, catalog):
    res = await client.post(
        "/albums", content=b'{"id": "x", "title": "t", "price": 1e999}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["context"]["details"][0]["field"] == "price"
    assert catalog.count() == 3


async def test_request_and_domain_validation_share_envelope(client):
    res = await client.post("/albums", json={"id": "", "title": "t"})
    body = res.json()["error"]
    assert set(body) == {"code", "status", "message", "timestamp", "context"}
    assert set(body["context"]) == {"album_id", "app_code", "details"}
    assert set(body["context"]["details"][0]) == {"field", "rule", "message"}


# ─── Ids containing "/" ──────────────────────────────────────────

async def test_id_with_slash_can_be_fetched_back(client):
    album = {"id": "a/b", "title": "Slash", "price": 1.0}
    res = await client.post("/albums", json=album)
    assert res.status_code == 201

    res = await client.get("/albums/a%2Fb")
    assert res.status_code == 200
    assert res.json() == album

    res = await client.get("/albums/a/b")
    assert res.status_code == 200
    assert res.json() == album


# ─── Routing errors use the error envelope ───────────────────────

async def test_unknown_route_returns_404_envelope(client):
    res = await client.get("/records")
    assert res.status_code == 404
    body = res.json()["error"]
    assert body["status"] == "NOT_FOUND"
    assert body["message"] == "Not Found"


async def test_wrong_method_returns_405_envelope(client):
    res = await client.delete("/albums")
    assert res.status_code == 405
    assert res.json()["error"]["status"] == "UNIMPLEMENTED"
    assert "allow" in res.headers
