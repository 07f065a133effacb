# app/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_serializer
from pydantic.alias_generators import to_camel

from app.domain.enums import (
    NotificationStatus,
    NotificationType,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    Role,
)

# kwoty trzymamy jako Decimal, na zewnatrz leca jako liczby JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

T = TypeVar("T")


class CamelModel(BaseModel):
    """snake_case w Pythonie, camelCase w JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Wspolna koperta odpowiedzi wszystkich serwisow."""

    success: bool = True
    message: str | None = None
    data: T | None = None
    count: int | None = None

    @model_serializer(mode="wrap")
    def _only_set_keys(self, handler):
        # w kopercie tylko klucze ustawione przez endpoint
        body = handler(self)
        for name in ("message", "data", "count"):
            if name not in self.model_fields_set:
                body.pop(name, None)
        return body


# ---------------------------------------------------------------- users


class RegisterIn(CamelModel):
    """Schema dla rejestracji uzytkownika."""

    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=2)
    last_name: str = Field(..., min_length=2)


class LoginIn(CamelModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)


class ProfileUpdateIn(CamelModel):
    first_name: str | None = None
    last_name: str | None = None


class VerifyIn(CamelModel):
    token: str | None = None


class UserOut(CamelModel):
    """Uzytkownik bez hasla."""

    id: int
    email: str
    first_name: str
    last_name: str
    role: Role
    is_active: bool
    created_at: datetime


class LoginOut(CamelModel):
    user: UserOut
    token: str


class TokenUser(CamelModel):
    """To co zwraca /api/users/verify i co trafia do innych serwisow."""

    id: int
    email: str
    role: Role


# ---------------------------------------------------------------- products


class ProductOut(CamelModel):
    id: int
    name: str
    price: Money
    category: str
    stock: int
    description: str


class StockUpdateIn(CamelModel):
    quantity: int


class CategoryResponse(ApiResponse[List[ProductOut]]):
    category: str


# ---------------------------------------------------------------- cart


class CartItemIn(CamelModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    quantity: int = Field(..., gt=0, description="Ilość produktu (musi być > 0)")


class CartItemOut(CamelModel):
    product_id: int
    name: str
    price: Money
    quantity: int
    subtotal: Money


class CartOut(CamelModel):
    user_id: int
    items: List[CartItemOut]
    total: Money
    item_count: int


class CartAddOut(CamelModel):
    cart: CartOut
    added_item: CartItemOut


class CartRemoveOut(CamelModel):
    cart: CartOut
    removed_item: CartItemOut


# ---------------------------------------------------------------- orders


class OrderItemIn(CamelModel):
    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)
    price: Decimal = Field(..., gt=0)


class ShippingAddress(CamelModel):
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)


class OrderCreate(CamelModel):
    """Schema dla checkoutu."""

    items: List[OrderItemIn] = Field(..., min_length=1)
    shipping_address: ShippingAddress
    payment_method: PaymentMethod


class OrderStatusIn(CamelModel):
    status: OrderStatus


class OrderItemOut(CamelModel):
    product_id: int
    quantity: int
    price: Money
    subtotal: Money


class OrderOut(CamelModel):
    """Schema dla zamówienia (response)."""

    id: str
    user_id: int
    items: List[OrderItemOut]
    shipping_address: ShippingAddress
    payment_method: PaymentMethod
    subtotal: Money
    shipping_cost: Money
    tax: Money
    total: Money
    status: OrderStatus
    payment_status: PaymentStatus
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------- notifications


class SendNotificationIn(CamelModel):
    user_id: int = Field(..., gt=0)
    type: NotificationType
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    metadata: dict[str, Any] | None = None


class SendTemplateIn(CamelModel):
    # wymagalnosc sprawdzana w serwisie, zeby zwrocic wlasny komunikat
    template_name: str | None = None
    user_id: int | None = None
    variables: dict[str, Any] | None = None


class TemplateCreateIn(CamelModel):
    name: str = Field(..., min_length=1)
    type: NotificationType
    subject: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    variables: List[str] | None = None


class EventIn(CamelModel):
    event_type: str | None = None
    user_id: int | None = None
    data: dict[str, Any] | None = None


class NotificationOut(CamelModel):
    id: str
    user_id: int
    type: NotificationType
    subject: str
    message: str
    metadata: dict[str, Any]
    status: NotificationStatus
    created_at: datetime
    sent_at: datetime | None = None
    delivered_at: datetime | None = None


class TemplateOut(CamelModel):
    name: str
    type: NotificationType
    subject: str
    body: str
    variables: List[str]
    created_at: datetime | None = None


class NotificationStatsOut(CamelModel):
    total: int
    sent: int
    failed: int
    by_type: dict[str, int]
