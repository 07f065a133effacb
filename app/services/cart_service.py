# app/services/cart_service.py
from decimal import Decimal

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.domain.errors import NotFoundError, ValidationFailed
from app.repos.cart_repo import CartRepo
from app.services.product_client import ProductClient
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka.
    commands (add, remove, clear) modyfikuja stan,
    query (get) tylko odczyt - brak koszyka to pusty koszyk
    """

    def __init__(self, repo: CartRepo, product_client: ProductClient):
        self.repo = repo
        self.product_client = product_client

    #query - odczyt
    def get_cart(self, user_id: int) -> CartModel:
        cart = self.repo.get_cart(user_id) or CartModel(user_id=user_id)
        logger.info(f"Retrieved cart for user {user_id}: {len(cart.items)} items")
        return cart

    #commands
    def add_item(self, user_id: int, product_id: int, quantity: int) -> tuple[CartModel, CartItemModel]:
        if quantity <= 0:
            raise ValidationFailed("Quantity must be greater than 0")

        # HTTP do product-service (walidacja + cena)
        logger.info(f"Fetching product {product_id} from product-service")
        pdata = self.product_client.fetch_product(product_id)
        price = Decimal(str(pdata["price"]))

        if pdata["stock"] < quantity:
            raise ValidationFailed(
                f"Insufficient stock. Available: {pdata['stock']}, Requested: {quantity}"
            )

        cart = self.repo.get_or_create_cart(user_id)

        existing_item = cart.find_item(product_id)
        if existing_item:
            logger.info(
                f"Product {product_id} already in cart, quantity "
                f"{existing_item.quantity} -> {existing_item.quantity + quantity}"
            )
            # cena zostaje z pierwszego dodania
            existing_item.quantity += quantity
        else:
            cart.items.append(
                CartItemModel(
                    product_id=product_id,
                    name=pdata["name"],
                    price=price,
                    quantity=quantity,
                )
            )

        added = CartItemModel(
            product_id=product_id,
            name=pdata["name"],
            price=price,
            quantity=quantity,
        )
        logger.info(f"Added {quantity}x {pdata['name']} to cart for user {user_id}")
        return cart, added

    def remove_item(self, user_id: int, product_id: int) -> tuple[CartModel, CartItemModel]:
        cart = self.repo.get_cart(user_id)
        if not cart:
            raise NotFoundError("Cart not found")

        item = cart.find_item(product_id)
        if not item:
            raise NotFoundError("Item not found in cart")

        cart.items.remove(item)
        logger.info(f"Removed {item.name} from cart for user {user_id}")
        return cart, item

    def clear_cart(self, user_id: int) -> None:
        self.repo.delete_cart(user_id)
        logger.info(f"Cleared cart for user {user_id}")
