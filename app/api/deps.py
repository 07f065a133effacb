# app/api/deps.py
"""Zaleznosci FastAPI: serwisy z app.state i uwierzytelnianie."""
from fastapi import Depends, Header, Request

from app.domain.enums import Role
from app.domain.errors import AuthenticationError, ForbiddenError
from app.services.cart_service import CartService
from app.services.notification_client import NotificationClient
from app.services.notification_service import NotificationService
from app.services.order_service import OrderService
from app.services.payment_service import PaymentService
from app.services.product_client import ProductClient
from app.services.product_service import ProductService
from app.services.user_client import UserClient
from app.services.user_service import UserService


def get_bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    # "Bearer TOKEN"
    if not authorization:
        return None
    parts = authorization.split(" ")
    return parts[1] if len(parts) > 1 and parts[1] else None


def require_token(token: str | None = Depends(get_bearer_token)) -> str:
    if not token:
        raise AuthenticationError("Access token required")
    return token


# ---------------------------------------------------------------- clients


def get_product_client(request: Request) -> ProductClient:
    return request.app.state.product_client


def get_user_client(request: Request) -> UserClient:
    return request.app.state.user_client


def get_notification_client(request: Request) -> NotificationClient | None:
    return request.app.state.notification_client


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


# ---------------------------------------------------------------- services


def get_user_service(request: Request) -> UserService:
    state = request.app.state
    return UserService(state.user_repo, jwt_secret=state.jwt_secret, auth_attempts=state.auth_attempts)


def get_product_service(request: Request) -> ProductService:
    return ProductService(request.app.state.product_repo)


def get_cart_service(
    request: Request,
    product_client: ProductClient = Depends(get_product_client),
) -> CartService:
    return CartService(request.app.state.cart_repo, product_client)


def get_order_service(
    request: Request,
    product_client: ProductClient = Depends(get_product_client),
    payment_service: PaymentService = Depends(get_payment_service),
    notification_client: NotificationClient | None = Depends(get_notification_client),
) -> OrderService:
    state = request.app.state
    return OrderService(
        state.order_repo,
        state.cart_repo,
        product_client,
        payment_service,
        notification_client,
    )


def get_notification_service(
    request: Request,
    user_client: UserClient = Depends(get_user_client),
) -> NotificationService:
    state = request.app.state
    return NotificationService(state.notification_repo, state.template_repo, user_client)


# ---------------------------------------------------------------- auth


def get_local_user(
    token: str = Depends(require_token),
    svc: UserService = Depends(get_user_service),
) -> dict:
    """user-service: token sprawdzany na miejscu."""
    return svc.decode_token(token)


def get_remote_user(
    token: str = Depends(require_token),
    user_client: UserClient = Depends(get_user_client),
) -> dict:
    """Pozostale serwisy: token sprawdza user-service (/api/users/verify)."""
    return user_client.verify_token(token)


def require_admin(user: dict = Depends(get_remote_user)) -> dict:
    # zaleznosci ida przed walidacja body, wiec klient dostaje 403 a nie 400
    if user.get("role") != Role.ADMIN.value:
        raise ForbiddenError("Admin access required")
    return user
