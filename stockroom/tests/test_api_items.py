def test_root_and_health(client):
    assert client.get("/").text == "Backend is working"
    assert client.get("/v1/health").json() == {"status": "ok"}


def test_item_crud(client):
    r = client.post("/v1/items", json={"name": "Huile de coco", "stock": 4, "price": 7.9})
    assert r.status_code == 201
    item_id = r.json()["id"]

    assert client.get(f"/v1/items/{item_id}").json() == {
        "id": item_id,
        "name": "Huile de coco",
        "stock": 4,
        "price": 7.9,
    }

    r = client.put(f"/v1/items/{item_id}", json={"name": "Huile de coco 1L", "stock": 6, "price": 8})
    assert r.json() == {"updated": 1}
    assert [i["name"] for i in client.get("/v1/items").json()] == ["Huile de coco 1L"]

    assert client.delete(f"/v1/items/{item_id}").status_code == 204
    assert client.get(f"/v1/items/{item_id}").status_code == 404


def test_item_payload_is_validated(client):
    assert client.post("/v1/items", json={"name": "", "stock": 1, "price": 1}).status_code == 422
    assert client.post("/v1/items", json={"name": "X", "stock": -1, "price": 1}).status_code == 422
    assert client.post("/v1/items", json={"name": "X", "stock": 1, "price": -0.5}).status_code == 422


def test_unknown_item_is_404(client):
    assert client.get("/v1/items/4242").status_code == 404
    assert client.get("/v1/items/4242/stock").status_code == 404
    assert client.put("/v1/items/4242", json={"name": "X", "stock": 1, "price": 1}).status_code == 404
    assert client.delete("/v1/items/4242").status_code == 404


def test_stock_query_follows_purchases(client, make_item):
    item_id = make_item(stock=10)

    client.post(
        "/v1/purchases",
        json={
            "customer_name": "Moana",
            "shipping_address": "Papeete",
            "items": [{"item_id": item_id, "quantity": 4}],
        },
    )

    assert client.get(f"/v1/items/{item_id}/stock").json() == {"item_id": item_id, "stock": 6}


def test_item_referenced_by_a_purchase_cannot_be_deleted(client, make_item):
    item_id = make_item(stock=10)
    client.post(
        "/v1/purchases",
        json={
            "customer_name": "Moana",
            "shipping_address": "Papeete",
            "items": [{"item_id": item_id, "quantity": 1}],
        },
    )

    r = client.delete(f"/v1/items/{item_id}")

    assert r.status_code == 409
    assert client.get(f"/v1/items/{item_id}").status_code == 200


def test_item_price_must_be_a_number(client):
    assert client.post("/v1/items", json={"name": "X", "stock": 1, "price": "5"}).status_code == 422
    assert client.post("/v1/items", json={"name": "X", "stock": 1, "price": 5}).status_code == 201
