"""Favorite Routes — verifies per-user favorites over HTTP.

Tests:
    - PUT is idempotent and returns 204
    - Favorites of one user are invisible to another
    - DELETE of an absent favorite returns 204
    - Unknown user or product → 404
    - Deleting a product drops it from favorites
"""


async def _register(client, username):
    res = await client.post(
        "/api/v1/users/register", json={"username": username, "password": "pw"},
    )
    assert res.status_code == 201


async def test_add_favorite_is_idempotent(client, registered_user, created_product):
    url = f"/api/v1/users/alice/favorites/{created_product['id']}"
    assert (await client.put(url)).status_code == 204
    assert (await client.put(url)).status_code == 204

    res = await client.get("/api/v1/users/alice/favorites")
    assert [p["id"] for p in res.json()] == [created_product["id"]]


async def test_favorites_are_per_user(client, registered_user, created_product):
    await _register(client, "bob")
    await client.put(f"/api/v1/users/alice/favorites/{created_product['id']}")

    res = await client.get("/api/v1/users/bob/favorites")
    assert res.json() == []


async def test_remove_favorite(client, registered_user, created_product):
    url = f"/api/v1/users/alice/favorites/{created_product['id']}"
    await client.put(url)

    assert (await client.delete(url)).status_code == 204
    assert (await client.delete(url)).status_code == 204
    assert (await client.get("/api/v1/users/alice/favorites")).json() == []


async def test_favorite_unknown_product_returns_404(client, registered_user):
    res = await client.put("/api/v1/users/alice/favorites/999")
    assert res.status_code == 404


async def test_favorites_of_unknown_user_return_404(client):
    res = await client.get("/api/v1/users/ghost/favorites")
    assert res.status_code == 404


async def test_deleted_product_leaves_favorites(client, registered_user, created_product):
    await client.put(f"/api/v1/users/alice/favorites/{created_product['id']}")
    await client.delete(f"/api/v1/products/{created_product['id']}")

    res = await client.get("/api/v1/users/alice/favorites")
    assert res.json() == []
