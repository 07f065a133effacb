# app/repos/order_repo.py
from datetime import datetime, timezone

from app.data.models.order import OrderModel
from app.domain.enums import OrderStatus


class OrderRepo:
    def __init__(self, orders: list[OrderModel] | None = None):
        self.orders = orders if orders is not None else []

    def create_order(self, order: OrderModel) -> OrderModel:
        self.orders.append(order)
        return order

    def get_order(self, order_id: str) -> OrderModel | None:
        return next((o for o in self.orders if o.id == order_id), None)

    def list_for_user(self, user_id: int) -> list[OrderModel]:
        return [o for o in self.orders if o.user_id == user_id]

    def update_order_status(self, order_id: str, status: OrderStatus) -> OrderModel | None:
        order = self.get_order(order_id)
        if order:
            order.status = status
            order.updated_at = datetime.now(timezone.utc)
        return order

    def clear(self) -> None:
        self.orders.clear()
