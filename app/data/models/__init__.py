#modele w pamieci procesu, kazdy serwis trzyma swoje w repozytoriach

from app.data.models.user import UserModel
from app.data.models.product import ProductModel
from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.order import OrderModel, OrderItemModel, ShippingAddressModel
from app.data.models.notification import NotificationModel
from app.data.models.template import TemplateModel

__all__ = [
    "UserModel",
    "ProductModel",
    "CartModel",
    "CartItemModel",
    "OrderModel",
    "OrderItemModel",
    "ShippingAddressModel",
    "NotificationModel",
    "TemplateModel",
]
