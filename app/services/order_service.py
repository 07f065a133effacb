# app/services/order_service.py
import uuid
from decimal import Decimal, ROUND_HALF_UP

from app.data.models.order import OrderItemModel, OrderModel, ShippingAddressModel
from app.domain.enums import EventType, OrderStatus, PaymentStatus, Role
from app.domain.errors import ForbiddenError, NotFoundError, ServiceError, ValidationFailed
from app.domain.schemas import OrderCreate
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.services.notification_client import NotificationClient
from app.services.payment_service import PaymentService
from app.services.product_client import ProductClient
from app.utils.settings import FREE_SHIPPING_THRESHOLD, SHIPPING_COST, TAX_RATE
from app.utils.logging import get_logger

logger = get_logger(__name__)

CENTS = Decimal("0.01")


def compute_totals(
    items: list[OrderItemModel],
    tax_rate: Decimal = Decimal(TAX_RATE),
    shipping_cost: Decimal = Decimal(SHIPPING_COST),
    free_shipping_threshold: Decimal = Decimal(FREE_SHIPPING_THRESHOLD),
) -> dict[str, Decimal]:
    """Subtotal, podatek, wysylka i suma dla listy pozycji.

    Wysylka jest darmowa dopiero powyzej progu (nie od progu). Podatek
    zaokraglany do centow.
    """
    subtotal = sum((i.subtotal for i in items), Decimal("0.00"))
    shipping = Decimal("0.00") if subtotal > free_shipping_threshold else shipping_cost
    tax = (subtotal * tax_rate).quantize(CENTS, rounding=ROUND_HALF_UP)
    return {
        "subtotal": subtotal,
        "shipping_cost": shipping,
        "tax": tax,
        "total": subtotal + shipping + tax,
    }


class OrderService:
    """
    Checkout i zapytania o zamowienia.

    Checkout to sekwencja wywolan bez kompensacji:
    1. sprawdzenie stanow w product-service (po kolei dla kazdej pozycji)
    2. wyliczenie kwot
    3. symulowana platnosc
    4. zmniejszenie stanow (tylko po udanej platnosci)
    Blad w kroku 4 nie cofa platnosci ani zamowienia.
    """

    def __init__(
        self,
        repo: OrderRepo,
        cart_repo: CartRepo,
        product_client: ProductClient,
        payment_service: PaymentService,
        notification_client: NotificationClient | None = None,
    ):
        self.repo = repo
        self.cart_repo = cart_repo
        self.product_client = product_client
        self.payment_service = payment_service
        self.notification_client = notification_client

    def _verify_stock(self, payload: OrderCreate) -> None:
        for item in payload.items:
            try:
                product = self.product_client.fetch_product(item.product_id)
            except NotFoundError:
                raise NotFoundError(f"Product {item.product_id} not found")

            if product["stock"] < item.quantity:
                raise ValidationFailed(
                    f"Insufficient stock for product {product['name']}. "
                    f"Available: {product['stock']}, Requested: {item.quantity}"
                )

    def _decrement_stock(self, order: OrderModel) -> None:
        for item in order.items:
            try:
                current = self.product_client.get_stock(item.product_id)
                self.product_client.update_stock(item.product_id, current - item.quantity)
            except ServiceError as e:
                # brak kompensacji - zamowienie zostaje potwierdzone
                logger.error(
                    f"Stock decrement failed for product {item.product_id} "
                    f"in order {order.id}: {e.message}"
                )

    def _notify(self, order: OrderModel) -> None:
        if self.notification_client is None:
            return
        event = (
            EventType.ORDER_CONFIRMED
            if order.payment_status == PaymentStatus.COMPLETED
            else EventType.PAYMENT_FAILED
        )
        self.notification_client.send_event(
            event.value,
            order.user_id,
            {"orderId": order.id, "total": float(order.total)},
        )

    def create_order(self, user_id: int, payload: OrderCreate) -> OrderModel:
        """Use Case: checkout."""
        self._verify_stock(payload)

        items = [
            OrderItemModel(product_id=i.product_id, quantity=i.quantity, price=i.price)
            for i in payload.items
        ]
        totals = compute_totals(items)
        address = payload.shipping_address

        order = OrderModel(
            id=str(uuid.uuid4()),
            user_id=user_id,
            items=items,
            shipping_address=ShippingAddressModel(
                street=address.street,
                city=address.city,
                state=address.state,
                zip_code=address.zip_code,
                country=address.country,
            ),
            payment_method=payload.payment_method,
            **totals,
        )

        if self.payment_service.charge(payload.payment_method, order.total):
            order.status = OrderStatus.CONFIRMED
            order.payment_status = PaymentStatus.COMPLETED
            self._decrement_stock(order)
            logger.info(f"Order {order.id} created and confirmed for user {user_id}")
        else:
            order.status = OrderStatus.CANCELLED
            order.payment_status = PaymentStatus.FAILED
            logger.info(f"Order {order.id} failed payment for user {user_id}")

        self.repo.create_order(order)
        self.cart_repo.delete_cart(user_id)
        self._notify(order)
        return order

    def list_orders(self, user_id: int) -> list[OrderModel]:
        orders = self.repo.list_for_user(user_id)
        logger.info(f"Retrieved {len(orders)} orders for user {user_id}")
        return orders

    def get_order(self, order_id: str, user_id: int) -> OrderModel:
        order = self.repo.get_order(order_id)
        # cudze zamowienie wyglada jak nieistniejace
        if not order or order.user_id != user_id:
            raise NotFoundError("Order not found")
        return order

    def update_status(self, order_id: str, status: OrderStatus, user: dict) -> OrderModel:
        if user.get("role") != Role.ADMIN.value:
            raise ForbiddenError("Admin access required")

        order = self.repo.update_order_status(order_id, status)
        if not order:
            raise NotFoundError("Order not found")

        logger.info(f"Updated order {order_id} status to {status.value} by admin {user.get('id')}")
        return order

    def clear_orders(self) -> None:
        self.repo.clear()
