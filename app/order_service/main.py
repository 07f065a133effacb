# app/order_service/main.py
import uvicorn
from fastapi import FastAPI

from app.api import create_service_app
from app.api.routers import cart, orders
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.services.notification_client import NotificationClient
from app.services.payment_service import PaymentService
from app.services.product_client import ProductClient
from app.services.user_client import UserClient
from app.utils.settings import (
    NOTIFY_ORDER_EVENTS,
    ORDER_SERVICE_PORT,
    PRODUCT_SERVICE_URL,
    USER_SERVICE_URL,
    is_test,
)
from app.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(
    enable_test_routes: bool | None = None,
    notify_events: bool = NOTIFY_ORDER_EVENTS,
) -> FastAPI:
    if enable_test_routes is None:
        enable_test_routes = is_test()

    routers = [cart.router, orders.router]
    if enable_test_routes:
        routers.append(orders.test_router)

    app = create_service_app("order-service", "Order Service", routers)
    app.state.cart_repo = CartRepo()
    app.state.order_repo = OrderRepo()
    app.state.product_client = ProductClient()
    app.state.user_client = UserClient()
    app.state.payment_service = PaymentService()
    app.state.notification_client = NotificationClient() if notify_events else None

    logger.info(f"Connected to User Service: {USER_SERVICE_URL}")
    logger.info(f"Connected to Product Service: {PRODUCT_SERVICE_URL}")
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=ORDER_SERVICE_PORT)
