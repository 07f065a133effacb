"""Tests for the order-service shopping cart."""

from tests.fakes import ADMIN_TOKEN, CUSTOMER_TOKEN, auth


def add(order_api, product_id, quantity, token=CUSTOMER_TOKEN):
    return order_api.post(
        "/api/cart/items",
        json={"productId": product_id, "quantity": quantity},
        headers=auth(token),
    )


class TestAuth:
    def test_missing_token(self, order_api):
        response = order_api.get("/api/cart")
        assert response.status_code == 401
        assert response.json()["message"] == "Access token required"

    def test_rejected_token(self, order_api):
        response = order_api.get("/api/cart", headers=auth("bogus"))
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    def test_user_service_down(self, order_api, fake_users):
        fake_users.unreachable = True
        response = order_api.get("/api/cart", headers=auth(CUSTOMER_TOKEN))
        assert response.status_code == 401
        assert response.json()["message"] == "Token verification failed"


class TestGetCart:
    def test_empty_cart(self, order_api):
        response = order_api.get("/api/cart", headers=auth(CUSTOMER_TOKEN))
        assert response.status_code == 200
        assert response.json()["data"] == {"userId": 1, "items": [], "total": 0.0, "itemCount": 0}


class TestAddItem:
    def test_add_new_item(self, order_api):
        response = add(order_api, 1, 2)
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Item added to cart"
        assert body["data"]["addedItem"] == {
            "productId": 1,
            "name": "Wireless Headphones",
            "price": 99.99,
            "quantity": 2,
            "subtotal": 199.98,
        }
        cart = body["data"]["cart"]
        assert cart["total"] == 199.98
        assert cart["itemCount"] == 2

    def test_merge_updates_quantity_and_subtotal(self, order_api):
        add(order_api, 2, 1)
        cart = add(order_api, 2, 2).json()["data"]["cart"]
        assert len(cart["items"]) == 1
        assert cart["items"][0]["quantity"] == 3
        assert cart["items"][0]["subtotal"] == 239.97
        assert cart["total"] == 239.97
        assert cart["itemCount"] == 3

    def test_price_snapshot_kept(self, order_api, fake_products):
        add(order_api, 4, 1)
        fake_products.products[4]["price"] = 10.0
        cart = order_api.get("/api/cart", headers=auth(CUSTOMER_TOKEN)).json()["data"]
        assert cart["items"][0]["price"] == 49.99

    def test_insufficient_stock(self, order_api):
        response = add(order_api, 4, 16)
        assert response.status_code == 400
        assert response.json()["message"] == "Insufficient stock. Available: 15, Requested: 16"

    def test_unknown_product(self, order_api):
        response = add(order_api, 42, 1)
        assert response.status_code == 404
        assert response.json()["message"] == "Product not found"

    def test_non_positive_quantity_is_validation_error(self, order_api):
        response = add(order_api, 1, 0)
        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"

    def test_carts_are_per_user(self, order_api):
        add(order_api, 1, 1)
        admin_cart = order_api.get("/api/cart", headers=auth(ADMIN_TOKEN)).json()["data"]
        assert admin_cart["userId"] == 2
        assert admin_cart["items"] == []


class TestRemoveItem:
    def test_remove_item(self, order_api):
        add(order_api, 1, 1)
        add(order_api, 3, 1)
        response = order_api.delete("/api/cart/items/1", headers=auth(CUSTOMER_TOKEN))
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["removedItem"]["productId"] == 1
        assert [i["productId"] for i in data["cart"]["items"]] == [3]
        assert data["cart"]["total"] == 129.99

    def test_no_cart(self, order_api):
        response = order_api.delete("/api/cart/items/1", headers=auth(CUSTOMER_TOKEN))
        assert response.status_code == 404
        assert response.json()["message"] == "Cart not found"

    def test_item_not_in_cart(self, order_api):
        add(order_api, 1, 1)
        response = order_api.delete("/api/cart/items/2", headers=auth(CUSTOMER_TOKEN))
        assert response.status_code == 404
        assert response.json()["message"] == "Item not found in cart"


def test_clear_cart(order_api):
    add(order_api, 1, 1)
    response = order_api.delete("/api/cart", headers=auth(CUSTOMER_TOKEN))
    assert response.status_code == 200
    assert response.json()["message"] == "Cart cleared"
    assert order_api.get("/api/cart", headers=auth(CUSTOMER_TOKEN)).json()["data"]["items"] == []


class TestEnvelope:
    def test_message_only(self, order_api):
        response = order_api.delete("/api/cart", headers=auth(CUSTOMER_TOKEN))
        assert response.json() == {"success": True, "message": "Cart cleared"}

    def test_data_only(self, order_api):
        body = order_api.get("/api/cart", headers=auth(CUSTOMER_TOKEN)).json()
        assert set(body) == {"success", "data"}

    def test_null_fields_inside_data_are_kept(self, order_api):
        add(order_api, 1, 1)
        body = order_api.post(
            "/api/cart/items",
            json={"productId": 2, "quantity": 1},
            headers=auth(CUSTOMER_TOKEN),
        ).json()
        assert set(body) == {"success", "message", "data"}
        assert set(body["data"]) == {"cart", "addedItem"}
