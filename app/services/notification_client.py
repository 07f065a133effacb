# app/services/notification_client.py
import requests
from requests import RequestException

from app.utils.settings import HTTP_TIMEOUT_SECONDS, NOTIFICATION_SERVICE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationClient:
    """
    Wysyla zdarzenia na webhook notification-service.
    Synchronicznie, bez kolejki - blad tylko logujemy.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = HTTP_TIMEOUT_SECONDS):
        self.base_url = (base_url or NOTIFICATION_SERVICE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def send_event(self, event_type: str, user_id: int, data: dict) -> bool:
        url = f"{self.base_url}/api/notifications/events"
        logger.info(f"NotificationClient POST {url} event={event_type} user={user_id}")
        try:
            resp = self.session.post(
                url,
                json={"eventType": event_type, "userId": user_id, "data": data},
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except RequestException as e:
            logger.warning(f"Failed to deliver event {event_type} for user {user_id}: {e}")
            return False
        return True
