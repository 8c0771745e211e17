import re

from sqlalchemy.exc import SQLAlchemyError

from herbal_garden.repos.order_repo import OrderRepo

ORDER_ID = re.compile(r"^ORD\d{16}$")


def test_place_order(api, tulsi_order):
    resp = api.post("/api/orders", json=tulsi_order)
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Order placed successfully!"
    assert ORDER_ID.match(body["data"]["orderId"])
    assert body["data"]["totalAmount"] == 26.86
    assert body["data"]["orderDate"]


def test_order_is_listed_with_snapshot(api, tulsi_order):
    order_id = api.post("/api/orders", json=tulsi_order).json()["data"]["orderId"]

    body = api.get("/api/orders").json()
    assert body["count"] == 1
    order = body["data"][0]
    assert order["orderId"] == order_id
    assert order["totalAmount"] == 26.86
    assert len(order["items"]) == 1
    assert order["items"][0] == {"productId": 1, "name": "Tulsi", "quantity": 2, "price": 13.43}
    assert order["customer"] == {"name": "A", "email": "a@b.com", "address": "X"}
    assert order["paymentMethod"] == "cod"
    assert order["status"] == "pending"


def test_missing_email_is_rejected_and_nothing_stored(api, tulsi_order):
    del tulsi_order["customer"]["email"]
    resp = api.post("/api/orders", json=tulsi_order)
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Customer info and items are required"}
    assert api.get("/api/orders").json()["count"] == 0


def test_malformed_email_is_rejected(api, tulsi_order):
    tulsi_order["customer"]["email"] = "a@"
    resp = api.post("/api/orders", json=tulsi_order)
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert api.get("/api/orders").json()["count"] == 0


def test_missing_name_or_customer_is_rejected(api, tulsi_order):
    tulsi_order["customer"]["name"] = ""
    assert api.post("/api/orders", json=tulsi_order).status_code == 400

    del tulsi_order["customer"]
    assert api.post("/api/orders", json=tulsi_order).status_code == 400


def test_empty_items_are_rejected(api, tulsi_order):
    tulsi_order["items"] = []
    resp = api.post("/api/orders", json=tulsi_order)
    assert resp.status_code == 400
    assert api.get("/api/orders").json()["count"] == 0


def test_non_positive_quantity_is_rejected(api, tulsi_order):
    tulsi_order["items"][0]["quantity"] = 0
    resp = api.post("/api/orders", json=tulsi_order)
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_unknown_payment_method_is_rejected(api, tulsi_order):
    tulsi_order["paymentMethod"] = "barter"
    assert api.post("/api/orders", json=tulsi_order).status_code == 400


def test_online_payment_and_notes_are_kept(api, tulsi_order):
    tulsi_order.update({"paymentMethod": "online", "notes": "leave at the door"})
    api.post("/api/orders", json=tulsi_order)
    order = api.get("/api/orders").json()["data"][0]
    assert order["paymentMethod"] == "online"
    assert order["notes"] == "leave at the door"


def test_total_not_matching_items_is_rejected(api, tulsi_order):
    tulsi_order["totalAmount"] = 1.00
    resp = api.post("/api/orders", json=tulsi_order)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Total amount does not match order items"
    assert api.get("/api/orders").json()["count"] == 0


def test_two_rapid_orders_get_distinct_ids(api, tulsi_order):
    first = api.post("/api/orders", json=tulsi_order).json()["data"]["orderId"]
    second = api.post("/api/orders", json=tulsi_order).json()["data"]["orderId"]
    assert first != second

    listed = [o["orderId"] for o in api.get("/api/orders").json()["data"]]
    assert listed == [second, first]


def test_storage_failure_is_generic_500(api, tulsi_order, monkeypatch):
    def broken(self, order):
        raise SQLAlchemyError("connection to secret-host:5432 refused")

    monkeypatch.setattr(OrderRepo, "create_order", broken)
    resp = api.post("/api/orders", json=tulsi_order)
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Error creating order"}
