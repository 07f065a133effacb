from dataclasses import dataclass
from decimal import Decimal


@dataclass
class CartItemModel:
    product_id: int
    name: str
    price: Decimal  # snapshot ceny z chwili dodania
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity
