"""Runs the demo walkthrough against all four apps wired together in-process."""

import pytest
import requests
from fastapi.testclient import TestClient

from app import demo
from app.services.payment_service import PaymentService
from app.services.product_client import ProductClient
from app.services.user_client import UserClient
from tests.fakes import TEST_JWT_SECRET


class BridgedResponse:
    """httpx response from TestClient dressed up as a requests response."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code
        self.ok = response.is_success

    def json(self):
        return self._response.json()

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code}: {self._response.text}")


class Bridge:
    """Routes requests-style calls to TestClients by base URL."""

    def __init__(self, clients: dict[str, TestClient]):
        self.clients = clients

    def request(self, method, url, **kwargs):
        kwargs.pop("timeout", None)
        for base, client in self.clients.items():
            if url.startswith(base):
                return BridgedResponse(client.request(method, url[len(base):], **kwargs))
        raise requests.ConnectionError(f"no service at {url}")

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self.request("POST", url, **kwargs)

    def patch(self, url, **kwargs):
        return self.request("PATCH", url, **kwargs)


@pytest.fixture
def platform(monkeypatch):
    from app.notification_service.main import create_app as notification_app
    from app.order_service.main import create_app as order_app
    from app.product_service.main import create_app as product_app
    from app.user_service.main import create_app as user_app

    apps = {
        demo.USER_SERVICE_URL: user_app(jwt_secret=TEST_JWT_SECRET),
        demo.PRODUCT_SERVICE_URL: product_app(),
        demo.ORDER_SERVICE_URL: order_app(enable_test_routes=False, notify_events=False),
        demo.NOTIFICATION_SERVICE_URL: notification_app(),
    }
    bridge = Bridge({url: TestClient(app) for url, app in apps.items()})

    def user_client():
        client = UserClient(base_url=demo.USER_SERVICE_URL)
        client.session = bridge
        return client

    product_client = ProductClient(base_url=demo.PRODUCT_SERVICE_URL)
    product_client.session = bridge

    order_state = apps[demo.ORDER_SERVICE_URL].state
    order_state.user_client = user_client()
    order_state.product_client = product_client
    order_state.payment_service = PaymentService(success_rate=1.0, delay_seconds=0)
    apps[demo.NOTIFICATION_SERVICE_URL].state.user_client = user_client()

    for method in ("get", "post", "patch"):
        monkeypatch.setattr(demo.requests, method, getattr(bridge, method))
    return apps


def test_full_walkthrough(platform, capsys):
    assert demo.run_demo() is True

    out = capsys.readouterr().out
    assert "Order status updated to: shipped" in out
    assert "Notifications: total 2, sent 2, failed 0" in out

    products = platform[demo.PRODUCT_SERVICE_URL].state.product_repo
    assert products.get_product(1).stock == 49
    assert products.get_product(2).stock == 23


def test_wait_for_service_gives_up(monkeypatch, capsys):
    bridge = Bridge({})
    monkeypatch.setattr(demo.requests, "get", bridge.get)
    assert demo.wait_for_service("Ghost", "http://ghost", max_retries=2, delay=0) is False
    out = capsys.readouterr().out
    assert "Waiting for Ghost... (attempt 1/2)" in out
    assert "Ghost is not responding" in out
