"""Item REST routes.

Invariants:
    - Unknown ids return 404 with "Item not found."
    - PUT replaces the whole row (omitted optional fields reset to empty)
"""


async def test_empty_table(client):
    res = await client.get("/items")
    assert res.status_code == 200
    assert res.json() == []


async def test_nonexistent_item(client):
    res = await client.get("/item/123")
    assert res.status_code == 404
    assert res.json()["detail"] == "Item not found."


async def test_create_item(client):
    res = await client.post(
        "/item",
        json={"name": "Test Item", "description": "Test Description", "quality": "common"},
    )
    assert res.status_code == 201
    assert res.json() == {
        "id": 1,
        "name": "Test Item",
        "description": "Test Description",
        "quality": "common",
    }


async def test_create_item_requires_name(client, store):
    res = await client.post("/item", json={"description": "no name"})
    assert res.status_code == 422

    res = await client.post("/item", json={"name": "   "})
    assert res.status_code == 400
    assert store.rows == {}


async def test_get_item(client, store):
    await store.create_item(name="Product 0", description="Test Description", quality="common")
    res = await client.get("/item/1")
    assert res.status_code == 200
    assert res.json()["name"] == "Product 0"


async def test_list_items(client, store):
    for i in range(3):
        await store.create_item(name=f"Product {i}")
    res = await client.get("/items")
    body = res.json()
    assert len(body) == 3
    assert [item["id"] for item in body] == [1, 2, 3]


async def test_update_item(client, store):
    await store.create_item(name="Product 0", description="Old", quality="common")
    res = await client.put("/item/1", json={"name": "Updated", "quality": "rare"})
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "Updated", "description": "", "quality": "rare"}


async def test_update_nonexistent_item(client):
    res = await client.put("/item/5", json={"name": "Updated"})
    assert res.status_code == 404


async def test_delete_item(client, store):
    await store.create_item(name="Product 0")
    res = await client.delete("/item/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "Product 0", "description": "", "quality": ""}

    res = await client.get("/item/1")
    assert res.status_code == 404

    res = await client.delete("/item/1")
    assert res.status_code == 404


async def test_non_integer_id_is_rejected(client):
    res = await client.get("/item/abc")
    assert res.status_code == 422


async def test_health(client):
    res = await client.get("/health")
    assert res.json() == {"status": "ok"}
