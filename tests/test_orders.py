from conftest import parse_timestamp


def test_create_order_scenario(client, order_payload):
    response = client.post("/orders", json=order_payload)

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], int)
    assert body["orderFrom"] == "Acme"
    assert body["contactInfo"] == "a@x.com"
    assert body["description"] == "Red Fabric"
    assert body["quantity"] == 5
    assert body["status"] == "CREATED"
    assert body["scheduledDelivery"] == "2025-01-01T00:00:00Z"
    assert body["createdAt"] == body["updatedAt"]
    assert body["createdAt"].endswith("Z")


def test_status_defaults_to_created(client, order_payload):
    del order_payload["status"]

    assert client.post("/orders", json=order_payload).json()["status"] == "CREATED"


def test_unknown_status_rejected(client, order_payload):
    order_payload["status"] = "LOST"

    assert client.post("/orders", json=order_payload).status_code == 422


def test_update_status(client, order_payload):
    created = client.post("/orders", json=order_payload).json()

    response = client.patch(
        f"/orders/{created['id']}/status", json={"status": "SHIPPED"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "SHIPPED"
    assert parse_timestamp(body["updatedAt"]) > parse_timestamp(created["updatedAt"])


def test_partial_update_merges_fields(client, order_payload):
    created = client.post("/orders", json=order_payload).json()

    body = client.patch(
        f"/orders/{created['id']}",
        json={"quantity": 9, "scheduledDelivery": "2025-02-01T12:00:00+02:00"}
    ).json()

    assert body["quantity"] == 9
    assert body["scheduledDelivery"] == "2025-02-01T10:00:00Z"
    assert body["orderFrom"] == "Acme"
    assert body["status"] == "CREATED"
    assert parse_timestamp(body["updatedAt"]) > parse_timestamp(created["updatedAt"])
    assert body["createdAt"] == created["createdAt"]


def test_partial_update_rejects_null_for_required_field(client, order_payload):
    created = client.post("/orders", json=order_payload).json()

    response = client.patch(f"/orders/{created['id']}", json={"description": None})

    assert response.status_code == 422
    assert client.get(f"/orders/{created['id']}").json()["description"] == "Red Fabric"


def test_get_missing_order(client):
    assert client.get("/orders/12").status_code == 404


def test_list_orders_ordered_by_id(client, order_payload):
    for sender in ["Zed Co", "Acme", "Mills"]:
        client.post("/orders", json={**order_payload, "orderFrom": sender})

    rows = client.get("/orders").json()

    assert [row["orderFrom"] for row in rows] == ["Zed Co", "Acme", "Mills"]


def test_delete_order(client, order_payload):
    created = client.post("/orders", json=order_payload).json()

    response = client.delete(f"/orders/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": f"Order {created['id']} deleted successfully",
    }
    assert client.get(f"/orders/{created['id']}").status_code == 404


def test_delete_missing_order_is_noop_success(client):
    response = client.delete("/orders/999")

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_naive_delivery_time_is_read_as_utc(client, order_payload):
    order_payload["scheduledDelivery"] = "2025-03-04T05:06:07"

    body = client.post("/orders", json=order_payload).json()

    assert body["scheduledDelivery"] == "2025-03-04T05:06:07Z"


def test_out_of_range_ids_rejected(client):
    huge = "99999999999999999999"

    assert client.get(f"/orders/{huge}").status_code == 422
    assert client.patch(f"/orders/{huge}/status", json={"status": "SHIPPED"}).status_code == 422
    assert client.delete(f"/orders/{huge}").status_code == 422
    assert client.get("/orders/0").status_code == 422
