# app/demo.py
"""
Pelny przeplyw klienta przez wszystkie cztery serwisy.

Wymaga uruchomionych serwisow (``shopmesh serve ...``). Kazdy krok to
zwykle wywolanie HTTP, wynik wypisywany na konsole.
"""
import uuid

import requests
from tenacity import (
    retry,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_fixed,
)

from app.utils.settings import (
    NOTIFICATION_SERVICE_URL,
    ORDER_SERVICE_URL,
    PRODUCT_SERVICE_URL,
    USER_SERVICE_URL,
)
from app.utils.logging import get_logger

logger = get_logger(__name__)

SERVICES = {
    "User Service": USER_SERVICE_URL,
    "Product Service": PRODUCT_SERVICE_URL,
    "Order Service": ORDER_SERVICE_URL,
    "Notification Service": NOTIFICATION_SERVICE_URL,
}


def wait_for_service(name: str, url: str, max_retries: int = 10, delay: float = 2.0) -> bool:
    def _log_wait(retry_state) -> None:
        print(f"Waiting for {name}... (attempt {retry_state.attempt_number}/{max_retries})")

    @retry(
        stop=stop_after_attempt(max_retries),
        wait=wait_fixed(delay),
        retry=retry_if_exception_type(requests.RequestException) | retry_if_result(lambda ok: not ok),
        before_sleep=_log_wait,
        retry_error_callback=lambda _state: False,
    )
    def _is_healthy() -> bool:
        resp = requests.get(f"{url}/health", timeout=2)
        return resp.ok and resp.json().get("status") == "healthy"

    if _is_healthy():
        print(f"{name} is healthy")
        return True

    print(f"{name} is not responding at {url}")
    return False


def _step(title: str) -> None:
    print(f"\n== {title}")


def _auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def run_demo() -> bool:
    if not all(wait_for_service(name, url) for name, url in SERVICES.items()):
        print("Start the services first: shopmesh serve <product|user|order|notification>")
        return False

    try:
        _step("Customer registration")
        email = f"demo-{uuid.uuid4().hex[:8]}@example.com"
        resp = requests.post(
            f"{USER_SERVICE_URL}/api/users/register",
            json={"email": email, "password": "password123", "firstName": "Alice", "lastName": "Johnson"},
        )
        resp.raise_for_status()
        user = resp.json()["data"]
        print(f"Registered {user['firstName']} {user['lastName']} <{email}>")

        resp = requests.post(
            f"{USER_SERVICE_URL}/api/users/login",
            json={"email": email, "password": "password123"},
        )
        resp.raise_for_status()
        token = resp.json()["data"]["token"]
        print("Logged in")

        _step("Browse catalog")
        products = requests.get(f"{PRODUCT_SERVICE_URL}/api/products").json()["data"]
        for p in products:
            print(f"  {p['id']}: {p['name']} ${p['price']:.2f} (stock {p['stock']})")

        _step("Fill the cart")
        for product_id, quantity in ((1, 1), (2, 2)):
            resp = requests.post(
                f"{ORDER_SERVICE_URL}/api/cart/items",
                json={"productId": product_id, "quantity": quantity},
                headers=_auth(token),
            )
            resp.raise_for_status()
        cart = requests.get(f"{ORDER_SERVICE_URL}/api/cart", headers=_auth(token)).json()["data"]
        print(f"Cart: {cart['itemCount']} items, total ${cart['total']:.2f}")

        _step("Checkout")
        order_payload = {
            "items": [
                {"productId": i["productId"], "quantity": i["quantity"], "price": i["price"]}
                for i in cart["items"]
            ],
            "shippingAddress": {
                "street": "123 Main St",
                "city": "New York",
                "state": "NY",
                "zipCode": "10001",
                "country": "USA",
            },
            "paymentMethod": "credit_card",
        }
        resp = requests.post(f"{ORDER_SERVICE_URL}/api/orders", json=order_payload, headers=_auth(token))
        resp.raise_for_status()
        order = resp.json()["data"]
        print(
            f"Order {order['id']}: {order['status']} / {order['paymentStatus']}, "
            f"subtotal ${order['subtotal']:.2f} tax ${order['tax']:.2f} "
            f"shipping ${order['shippingCost']:.2f} total ${order['total']:.2f}"
        )

        _step("Notifications")
        requests.post(
            f"{NOTIFICATION_SERVICE_URL}/api/notifications/send-template",
            json={
                "templateName": "order_confirmation",
                "userId": user["id"],
                "variables": {"orderId": order["id"][:8], "total": f"{order['total']:.2f}"},
            },
            headers=_auth(token),
        ).raise_for_status()
        requests.post(
            f"{NOTIFICATION_SERVICE_URL}/api/notifications/send",
            json={
                "userId": user["id"],
                "type": "sms",
                "subject": "Order Update",
                "message": f"Your order {order['id'][:8]} has been received.",
            },
            headers=_auth(token),
        ).raise_for_status()
        print("Order confirmation and SMS sent")

        _step("Admin operations")
        resp = requests.post(
            f"{USER_SERVICE_URL}/api/users/login",
            json={"email": "jane.smith@example.com", "password": "password"},
        )
        resp.raise_for_status()
        admin_token = resp.json()["data"]["token"]
        resp = requests.patch(
            f"{ORDER_SERVICE_URL}/api/orders/{order['id']}/status",
            json={"status": "shipped"},
            headers=_auth(admin_token),
        )
        resp.raise_for_status()
        print(f"Order status updated to: {resp.json()['data']['status']}")

        _step("Events")
        for event in (
            {"eventType": "low_stock", "userId": user["id"], "data": {"productId": 1, "currentStock": 5}},
            {"eventType": "order_shipped", "userId": user["id"], "data": {"orderId": order["id"]}},
        ):
            requests.post(f"{NOTIFICATION_SERVICE_URL}/api/notifications/events", json=event).raise_for_status()
        print("Events processed")

        _step("Summary")
        stats = requests.get(
            f"{NOTIFICATION_SERVICE_URL}/api/notifications/stats", headers=_auth(token)
        ).json()["data"]
        print(f"Notifications: total {stats['total']}, sent {stats['sent']}, failed {stats['failed']}")
        for p in requests.get(f"{PRODUCT_SERVICE_URL}/api/products").json()["data"][:2]:
            print(f"  {p['name']}: {p['stock']} remaining")

    except requests.RequestException as e:
        logger.error(f"Demo failed: {e}")
        return False

    return True
