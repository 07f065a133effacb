# app/services/channels.py
"""
Kanaly wysylki powiadomien.

Zaden kanal nie ma prawdziwego transportu - wszystkie tylko loguja.
W prawdziwym systemie bylby tu np. SendGrid/SES, Twilio, Firebase.
"""
from dataclasses import dataclass

from app.domain.enums import NotificationType
from app.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PHONE = "1234567890"


@dataclass
class DeliveryResult:
    success: bool
    message: str


class EmailChannel:
    def send(self, recipient: dict, subject: str, message: str) -> DeliveryResult:
        logger.info(f"[EMAIL] To: {recipient.get('email')}, Subject: {subject}")
        logger.info(f"[EMAIL] Message: {message}")
        return DeliveryResult(True, "Email sent successfully")


class SmsChannel:
    def send(self, recipient: dict, subject: str, message: str) -> DeliveryResult:
        phone = recipient.get("phone") or DEFAULT_PHONE
        logger.info(f"[SMS] To: {phone}, Message: {message}")
        return DeliveryResult(True, "SMS sent successfully")


class PushChannel:
    def send(self, recipient: dict, subject: str, message: str) -> DeliveryResult:
        logger.info(f"[PUSH] To: {recipient.get('id')}, Title: {subject}, Message: {message}")
        return DeliveryResult(True, "Push notification sent successfully")


class InAppChannel:
    def send(self, recipient: dict, subject: str, message: str) -> DeliveryResult:
        logger.info(f"[IN-APP] To: {recipient.get('id')}, Title: {subject}, Message: {message}")
        return DeliveryResult(True, "In-app notification sent successfully")


class NotificationChannels:
    """Fasada: wybiera kanal po typie powiadomienia."""

    def __init__(self, channels: dict | None = None):
        self.channels = channels or {
            NotificationType.EMAIL: EmailChannel(),
            NotificationType.SMS: SmsChannel(),
            NotificationType.PUSH: PushChannel(),
            NotificationType.IN_APP: InAppChannel(),
        }

    def dispatch(
        self,
        type_: NotificationType,
        recipient: dict,
        subject: str,
        message: str,
    ) -> DeliveryResult:
        channel = self.channels.get(type_)
        if channel is None:
            return DeliveryResult(False, "Unknown notification type")
        return channel.send(recipient, subject, message)
