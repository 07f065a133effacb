"""
Shared pytest fixtures.

Every test gets fresh application instances, so in-memory state never leaks
between tests. Cross-service HTTP clients are swapped for the fakes from
``tests.fakes`` on ``app.state``.
"""

import pytest
from fastapi.testclient import TestClient

from app.services.payment_service import PaymentService
from tests.fakes import (
    TEST_JWT_SECRET,
    FakeNotificationClient,
    FakeProductClient,
    FakeUserClient,
)


# =============================================================================
# Applications
# =============================================================================


@pytest.fixture
def product_app():
    from app.product_service.main import create_app

    return create_app()


@pytest.fixture
def product_api(product_app) -> TestClient:
    return TestClient(product_app)


@pytest.fixture
def user_app():
    from app.user_service.main import create_app

    return create_app(jwt_secret=TEST_JWT_SECRET)


@pytest.fixture
def user_api(user_app) -> TestClient:
    return TestClient(user_app)


@pytest.fixture
def fake_users() -> FakeUserClient:
    return FakeUserClient()


@pytest.fixture
def fake_products() -> FakeProductClient:
    return FakeProductClient()


@pytest.fixture
def fake_notifications() -> FakeNotificationClient:
    return FakeNotificationClient()


@pytest.fixture
def order_app(fake_users, fake_products):
    from app.order_service.main import create_app

    app = create_app(enable_test_routes=True, notify_events=False)
    app.state.user_client = fake_users
    app.state.product_client = fake_products
    app.state.payment_service = PaymentService(success_rate=1.0, delay_seconds=0)
    return app


@pytest.fixture
def order_api(order_app) -> TestClient:
    return TestClient(order_app)


@pytest.fixture
def notification_app(fake_users):
    from app.notification_service.main import create_app

    app = create_app()
    app.state.user_client = fake_users
    return app


@pytest.fixture
def notification_api(notification_app) -> TestClient:
    return TestClient(notification_app)
