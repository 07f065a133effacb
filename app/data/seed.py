# app/data/seed.py
from datetime import datetime, timezone
from decimal import Decimal

from app.data.models import ProductModel, TemplateModel, UserModel
from app.domain.enums import NotificationType, Role

# bcrypt hash dla hasla "password"
SEED_PASSWORD_HASH = "$2a$10$92IXUNpkjO0rOQ5byMi.Ye4oKoEa3Ro9llC/.og/at2.uheWG/igi"


def seed_users() -> list[UserModel]:
    return [
        UserModel(
            id=1,
            email="john.doe@example.com",
            password_hash=SEED_PASSWORD_HASH,
            first_name="John",
            last_name="Doe",
            role=Role.CUSTOMER,
            created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        ),
        UserModel(
            id=2,
            email="jane.smith@example.com",
            password_hash=SEED_PASSWORD_HASH,
            first_name="Jane",
            last_name="Smith",
            role=Role.ADMIN,
            created_at=datetime(2024, 1, 16, 14, 20, tzinfo=timezone.utc),
        ),
    ]


def seed_products() -> list[ProductModel]:
    return [
        ProductModel(
            id=1,
            name="Wireless Headphones",
            price=Decimal("99.99"),
            category="Electronics",
            stock=50,
            description="High-quality wireless headphones with noise cancellation",
        ),
        ProductModel(
            id=2,
            name="Coffee Maker",
            price=Decimal("79.99"),
            category="Kitchen",
            stock=25,
            description="Programmable coffee maker with 12-cup capacity",
        ),
        ProductModel(
            id=3,
            name="Running Shoes",
            price=Decimal("129.99"),
            category="Sports",
            stock=30,
            description="Comfortable running shoes for all terrains",
        ),
        ProductModel(
            id=4,
            name="Laptop Stand",
            price=Decimal("49.99"),
            category="Office",
            stock=15,
            description="Adjustable aluminum laptop stand for better ergonomics",
        ),
    ]


def seed_templates() -> list[TemplateModel]:
    return [
        TemplateModel(
            name="welcome_email",
            type=NotificationType.EMAIL,
            subject="Welcome to Our Store!",
            body="Hi {{firstName}}, welcome to our e-commerce platform! We're excited to have you on board.",
            variables=["firstName", "lastName", "email"],
        ),
        TemplateModel(
            name="order_confirmation",
            type=NotificationType.EMAIL,
            subject="Order Confirmed - {{orderId}}",
            body="Hi {{firstName}}, your order {{orderId}} has been confirmed! Total: ${{total}}",
            variables=["firstName", "orderId", "total"],
        ),
        TemplateModel(
            name="order_shipped",
            type=NotificationType.EMAIL,
            subject="Your Order Has Shipped!",
            body="Hi {{firstName}}, your order {{orderId}} is on its way! Tracking: {{trackingNumber}}",
            variables=["firstName", "orderId", "trackingNumber"],
        ),
        TemplateModel(
            name="low_stock_alert",
            type=NotificationType.EMAIL,
            subject="Low Stock Alert - {{productName}}",
            body="Alert: {{productName}} is running low on stock. Current stock: {{currentStock}}",
            variables=["productName", "currentStock", "threshold"],
        ),
    ]
