# app/services/payment_service.py
import random
import time
from decimal import Decimal

from app.domain.enums import PaymentMethod
from app.utils.settings import PAYMENT_DELAY_SECONDS, PAYMENT_SUCCESS_RATE
from app.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentService:
    """Symulowana bramka platnosci, bez prawdziwej integracji."""

    def __init__(
        self,
        success_rate: float = PAYMENT_SUCCESS_RATE,
        delay_seconds: float = PAYMENT_DELAY_SECONDS,
        rng: random.Random | None = None,
    ):
        self.success_rate = success_rate
        self.delay_seconds = delay_seconds
        self.rng = rng or random.Random()

    def charge(self, method: PaymentMethod, amount: Decimal) -> bool:
        if self.delay_seconds:
            time.sleep(self.delay_seconds)

        success = self.rng.random() < self.success_rate
        logger.info(
            f"Payment {method.value} amount={amount} -> {'completed' if success else 'failed'}"
        )
        return success
