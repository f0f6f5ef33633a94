"""Product Routes — verifies the catalog HTTP surface end to end.

Tests:
    - CRUD status codes and the delete message
    - Unknown ids map to 404 with the structured error envelope
    - Listing order via sort/order query params; pagination bounds
    - Search query params (name, category, minPrice, maxPrice)
    - PUT replaces (category reset) while PATCH merges
    - Stock adjustment and reviews
"""

import pytest


async def test_create_product_returns_201(created_product, product_payload):
    assert created_product["id"] is not None
    assert created_product["name"] == product_payload["name"]
    assert created_product["reviews"] == []


async def test_create_product_rejects_negative_price(client, product_payload):
    res = await client.post("/api/v1/products", json={**product_payload, "price": -1})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_get_product(client, created_product):
    res = await client.get(f"/api/v1/products/{created_product['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == created_product["id"]


async def test_get_unknown_product_returns_404(client):
    res = await client.get("/api/v1/products/999")
    assert res.status_code == 404
    body = res.json()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Product 999 not found"


async def test_list_products_sorted(client, product_payload):
    for name, price in (("Banana", 3.0), ("Apple", 9.0), ("Cherry", 1.0)):
        await client.post(
            "/api/v1/products", json={**product_payload, "name": name, "price": price},
        )

    res = await client.get("/api/v1/products")
    assert [p["name"] for p in res.json()] == ["Apple", "Banana", "Cherry"]

    res = await client.get("/api/v1/products", params={"sort": "price", "order": "desc"})
    assert [p["price"] for p in res.json()] == [9.0, 3.0, 1.0]


async def test_list_products_rejects_unknown_sort(client):
    res = await client.get("/api/v1/products", params={"sort": "colour"})
    assert res.status_code == 400


async def test_paginated_listing(client, product_payload):
    for i in range(12):
        await client.post(
            "/api/v1/products", json={**product_payload, "name": f"P{i:02d}"},
        )

    first = (await client.get("/api/v1/products/paginated")).json()
    second = (await client.get("/api/v1/products/paginated", params={"page": 2})).json()
    beyond = (await client.get("/api/v1/products/paginated", params={"page": 5})).json()

    assert len(first) == 10
    assert len(second) == 2
    assert beyond == []


async def test_paginated_rejects_page_zero(client):
    res = await client.get("/api/v1/products/paginated", params={"page": 0})
    assert res.status_code == 400


async def test_search_with_all_criteria(client, product_payload):
    await client.post("/api/v1/products", json={**product_payload, "name": "Test Phone"})
    await client.post("/api/v1/products", json={**product_payload, "name": "Test Big", "price": 50})
    await client.post(
        "/api/v1/products",
        json={**product_payload, "name": "Test Novel", "category": "books"},
    )

    res = await client.get("/api/v1/products/search", params={
        "name": "test", "category": "electronics", "minPrice": 5, "maxPrice": 20,
    })

    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["Test Phone"]


async def test_replace_product_resets_omitted_optional_fields(
    client, created_product, product_payload,
):
    replacement = {**product_payload, "name": "Replaced"}
    del replacement["category"]

    res = await client.put(f"/api/v1/products/{created_product['id']}", json=replacement)

    assert res.status_code == 200
    assert res.json()["name"] == "Replaced"
    assert res.json()["category"] is None


async def test_replace_product_requires_full_state(client, created_product):
    res = await client.put(
        f"/api/v1/products/{created_product['id']}", json={"name": "Only name"},
    )
    assert res.status_code == 400


async def test_patch_product_merges(client, created_product):
    res = await client.patch(
        f"/api/v1/products/{created_product['id']}", json={"price": 42.0},
    )
    assert res.status_code == 200
    assert res.json()["price"] == 42.0
    assert res.json()["category"] == created_product["category"]
    assert res.json()["name"] == created_product["name"]


async def test_patch_rejects_null_name(client, created_product):
    res = await client.patch(
        f"/api/v1/products/{created_product['id']}", json={"name": None},
    )
    assert res.status_code == 400


@pytest.mark.parametrize("method, suffix, body", [
    ("put", "", {
        "name": "n", "description": "d", "image": "i", "price": 1, "quantity": 1,
    }),
    ("patch", "", {"price": 1}),
    ("delete", "", None),
    ("patch", "/stock", {"delta": 1}),
    ("get", "/reviews", None),
    ("post", "/reviews", {"author": "a", "rating": 5}),
])
async def test_mutations_on_unknown_product_return_404(client, method, suffix, body):
    kwargs = {"json": body} if body is not None else {}
    res = await client.request(method.upper(), f"/api/v1/products/999{suffix}", **kwargs)
    assert res.status_code == 404


async def test_delete_product(client, created_product):
    pid = created_product["id"]
    res = await client.delete(f"/api/v1/products/{pid}")
    assert res.status_code == 200
    assert res.json() == {"message": "Product deleted successfully"}
    assert (await client.get(f"/api/v1/products/{pid}")).status_code == 404


async def test_stock_adjustment_may_go_negative(client, created_product):
    url = f"/api/v1/products/{created_product['id']}/stock"
    assert (await client.patch(url, json={"delta": 3})).json()["quantity"] == 8
    assert (await client.patch(url, json={"delta": -10})).json()["quantity"] == -2


async def test_reviews_round_trip(client, created_product):
    url = f"/api/v1/products/{created_product['id']}/reviews"
    res = await client.post(url, json={"author": "bob", "rating": 4, "comment": "nice"})
    assert res.status_code == 201

    reviews = (await client.get(url)).json()
    assert [(r["author"], r["rating"]) for r in reviews] == [("bob", 4)]

    product = (await client.get(f"/api/v1/products/{created_product['id']}")).json()
    assert len(product["reviews"]) == 1


async def test_review_rating_out_of_range(client, created_product):
    res = await client.post(
        f"/api/v1/products/{created_product['id']}/reviews",
        json={"author": "bob", "rating": 6},
    )
    assert res.status_code == 400
