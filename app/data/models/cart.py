#app/data/models/cart.py
from dataclasses import dataclass, field
from decimal import Decimal

from app.data.models.cart_item import CartItemModel


@dataclass
class CartModel:
    user_id: int
    items: list[CartItemModel] = field(default_factory=list)

    @property
    def total(self) -> Decimal:
        return sum((i.subtotal for i in self.items), Decimal("0.00"))

    @property
    def item_count(self) -> int:
        return sum(i.quantity for i in self.items)

    def find_item(self, product_id: int) -> CartItemModel | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
