from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from app.domain.enums import OrderStatus, PaymentMethod, PaymentStatus


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class OrderItemModel:
    product_id: int
    quantity: int
    price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


@dataclass
class ShippingAddressModel:
    street: str
    city: str
    state: str
    zip_code: str
    country: str


@dataclass
class OrderModel:
    id: str
    user_id: int
    items: list[OrderItemModel]
    shipping_address: ShippingAddressModel
    payment_method: PaymentMethod
    subtotal: Decimal
    shipping_cost: Decimal
    tax: Decimal
    total: Decimal
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
