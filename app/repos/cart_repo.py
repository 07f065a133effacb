# app/repos/cart_repo.py
from app.data.models.cart import CartModel


class CartRepo:
    """Koszyki trzymane w slowniku user_id -> koszyk."""

    def __init__(self, carts: dict[int, CartModel] | None = None):
        self.carts = carts if carts is not None else {}

    def get_cart(self, user_id: int) -> CartModel | None:
        return self.carts.get(user_id)

    def get_or_create_cart(self, user_id: int) -> CartModel:
        cart = self.carts.get(user_id)
        if cart is None:
            cart = CartModel(user_id=user_id)
            self.carts[user_id] = cart
        return cart

    def delete_cart(self, user_id: int) -> None:
        self.carts.pop(user_id, None)
