# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_JWT_SECRET = "your-super-secret-jwt-key-change-in-production"

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

JWT_SECRET = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", 24))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))

USER_SERVICE_URL = os.getenv("USER_SERVICE_URL", "http://localhost:3002")
PRODUCT_SERVICE_URL = os.getenv("PRODUCT_SERVICE_URL", "http://localhost:3001")
ORDER_SERVICE_URL = os.getenv("ORDER_SERVICE_URL", "http://localhost:3003")
NOTIFICATION_SERVICE_URL = os.getenv("NOTIFICATION_SERVICE_URL", "http://localhost:3004")

PRODUCT_SERVICE_PORT = int(os.getenv("PRODUCT_SERVICE_PORT", 3001))
USER_SERVICE_PORT = int(os.getenv("USER_SERVICE_PORT", 3002))
ORDER_SERVICE_PORT = int(os.getenv("ORDER_SERVICE_PORT", 3003))
NOTIFICATION_SERVICE_PORT = int(os.getenv("NOTIFICATION_SERVICE_PORT", 3004))

# None = czekaj bez limitu
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", 0)) or None
HTTP_RETRY_ATTEMPTS = int(os.getenv("HTTP_RETRY_ATTEMPTS", 1))

PAYMENT_SUCCESS_RATE = float(os.getenv("PAYMENT_SUCCESS_RATE", 0.9))
PAYMENT_DELAY_SECONDS = float(os.getenv("PAYMENT_DELAY_SECONDS", 1.0))

TAX_RATE = os.getenv("TAX_RATE", "0.08")
SHIPPING_COST = os.getenv("SHIPPING_COST", "10.00")
FREE_SHIPPING_THRESHOLD = os.getenv("FREE_SHIPPING_THRESHOLD", "100.00")

NOTIFY_ORDER_EVENTS = os.getenv("NOTIFY_ORDER_EVENTS", "false").lower() in ("1", "true", "yes")


def is_test() -> bool:
    return ENVIRONMENT == "test"
