# app/services/notification_service.py
import uuid
from datetime import datetime, timezone
from typing import Any

from app.data.models.notification import NotificationModel
from app.data.models.template import TemplateModel
from app.domain.enums import EventType, NotificationStatus, NotificationType
from app.domain.errors import ConflictError, NotFoundError, ValidationFailed
from app.domain.schemas import SendNotificationIn, SendTemplateIn, TemplateCreateIn
from app.repos.notification_repo import NotificationRepo, TemplateRepo
from app.services.channels import NotificationChannels
from app.services.user_client import UserClient
from app.utils.logging import get_logger

logger = get_logger(__name__)

# zdarzenie -> szablon, ktory by zostal uzyty
EVENT_TEMPLATES = {
    EventType.USER_REGISTERED: "welcome_email",
    EventType.ORDER_CREATED: None,
    EventType.ORDER_CONFIRMED: "order_confirmation",
    EventType.ORDER_SHIPPED: "order_shipped",
    EventType.LOW_STOCK: "low_stock_alert",
}


class NotificationService:
    """
    Wysylka powiadomien (email/sms/push/in_app), szablony i webhook zdarzen.
    Dane uzytkownika pobiera z user-service tokenem wywolujacego.
    """

    def __init__(
        self,
        repo: NotificationRepo,
        templates: TemplateRepo,
        user_client: UserClient,
        channels: NotificationChannels | None = None,
    ):
        self.repo = repo
        self.templates = templates
        self.user_client = user_client
        self.channels = channels or NotificationChannels()

    def _deliver(
        self,
        user_id: int,
        recipient: dict,
        type_: NotificationType,
        subject: str,
        message: str,
        metadata: dict[str, Any] | None,
    ) -> NotificationModel:
        notification = NotificationModel(
            id=str(uuid.uuid4()),
            user_id=user_id,
            type=type_,
            subject=subject,
            message=message,
            metadata=metadata or {},
        )

        result = self.channels.dispatch(type_, recipient, subject, message)
        if result.success:
            notification.status = NotificationStatus.SENT
            notification.sent_at = datetime.now(timezone.utc)
        else:
            notification.status = NotificationStatus.FAILED
            logger.warning(f"Notification {notification.id} failed: {result.message}")

        self.repo.add(notification)
        logger.info(f"Notification sent to user {user_id}: {type_.value} - {subject}")
        return notification

    def send(self, payload: SendNotificationIn, token: str) -> NotificationModel:
        user = self.user_client.get_profile(token)
        return self._deliver(
            payload.user_id,
            user,
            payload.type,
            payload.subject,
            payload.message,
            payload.metadata,
        )

    def send_template(self, payload: SendTemplateIn, token: str) -> NotificationModel:
        if not payload.template_name or not payload.user_id:
            raise ValidationFailed("Template name and user ID are required")

        template = self.templates.get(payload.template_name)
        if not template:
            raise NotFoundError("Template not found")

        user = self.user_client.get_profile(token)
        variables = payload.variables or {}
        subject, body = template.render({**variables, **user})

        return self._deliver(
            payload.user_id,
            user,
            template.type,
            subject,
            body,
            {"templateName": template.name, "variables": variables},
        )

    def list_notifications(self, user_id: int) -> list[NotificationModel]:
        notifications = self.repo.list_for_user(user_id)
        logger.info(f"Retrieved {len(notifications)} notifications for user {user_id}")
        return notifications

    def list_templates(self) -> list[TemplateModel]:
        return self.templates.list_templates()

    def create_template(self, payload: TemplateCreateIn) -> TemplateModel:
        if self.templates.exists(payload.name):
            raise ConflictError("Template with this name already exists")

        template = TemplateModel(
            name=payload.name,
            type=payload.type,
            subject=payload.subject,
            body=payload.body,
            variables=payload.variables or [],
            created_at=datetime.now(timezone.utc),
        )
        self.templates.add(template)
        logger.info(f"Created notification template: {template.name}")
        return template

    def process_event(self, event_type: str | None, user_id: int | None, data: dict | None) -> str:
        """Webhook: mapuje zdarzenie na akcje (na razie tylko log).

        Zwraca nazwe uzytego szablonu albo pusty string.
        """
        if not event_type or not user_id:
            raise ValidationFailed("Event type and user ID are required")

        logger.info(f"Processing event: {event_type} for user {user_id}")
        data = data or {}

        try:
            event = EventType(event_type)
        except ValueError:
            event = None

        if event not in EVENT_TEMPLATES:
            logger.info(f"Unknown event type: {event_type}")
            return ""

        template_name = EVENT_TEMPLATES[event]
        if template_name is None:
            logger.info(f"Order created notification for user {user_id}")
            return ""

        if not self.templates.get(template_name):
            return ""

        if event == EventType.LOW_STOCK:
            logger.info(f"Sending low stock alert for product {data.get('productId')}")
        else:
            logger.info(f"Sending {template_name} to user {user_id}")
        return template_name

    def stats(self, user_id: int) -> dict:
        notifications = self.repo.list_for_user(user_id)
        return {
            "total": len(notifications),
            "sent": sum(1 for n in notifications if n.status == NotificationStatus.SENT),
            "failed": sum(1 for n in notifications if n.status == NotificationStatus.FAILED),
            "by_type": {
                t.value: sum(1 for n in notifications if n.type == t)
                for t in NotificationType
            },
        }

    def total_notifications(self) -> int:
        return self.repo.count()
