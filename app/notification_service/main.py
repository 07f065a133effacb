# app/notification_service/main.py
import uvicorn
from fastapi import FastAPI, Request

from app.api import create_service_app
from app.api.routers import notifications
from app.data.seed import seed_templates
from app.repos.notification_repo import NotificationRepo, TemplateRepo
from app.services.notification_service import NotificationService
from app.services.user_client import UserClient
from app.utils.settings import NOTIFICATION_SERVICE_PORT, USER_SERVICE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _queue_stats(request: Request) -> dict:
    # brak kolejki - wysylka jest synchroniczna
    state = request.app.state
    svc = NotificationService(state.notification_repo, state.template_repo, state.user_client)
    return {"queueSize": 0, "totalNotifications": svc.total_notifications()}


def create_app() -> FastAPI:
    app = create_service_app(
        "notification-service",
        "Notification Service",
        [notifications.router],
        health_extra=_queue_stats,
    )
    app.state.notification_repo = NotificationRepo()
    app.state.template_repo = TemplateRepo(seed_templates())
    app.state.user_client = UserClient()

    logger.info("Initialized notification templates")
    logger.info(f"Connected to User Service: {USER_SERVICE_URL}")
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=NOTIFICATION_SERVICE_PORT)
