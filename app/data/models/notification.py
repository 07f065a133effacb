from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from app.domain.enums import NotificationStatus, NotificationType


@dataclass
class NotificationModel:
    id: str
    user_id: int
    type: NotificationType
    subject: str
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)
    status: NotificationStatus = NotificationStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    sent_at: datetime | None = None
    delivered_at: datetime | None = None
