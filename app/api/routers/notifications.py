# app/api/routers/notifications.py
from fastapi import APIRouter, Depends

from app.api.deps import get_notification_service, get_remote_user, require_token
from app.domain.schemas import (
    ApiResponse,
    EventIn,
    NotificationOut,
    NotificationStatsOut,
    SendNotificationIn,
    SendTemplateIn,
    TemplateCreateIn,
    TemplateOut,
)
from app.services.notification_service import NotificationService

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.post(
    "/send",
    response_model=ApiResponse[NotificationOut],
    dependencies=[Depends(get_remote_user)],
)
def send_notification(
    payload: SendNotificationIn,
    token: str = Depends(require_token),
    svc: NotificationService = Depends(get_notification_service),
):
    notification = svc.send(payload, token)
    return {
        "success": True,
        "message": "Notification sent successfully",
        "data": NotificationOut.model_validate(notification),
    }


@router.post(
    "/send-template",
    response_model=ApiResponse[NotificationOut],
    dependencies=[Depends(get_remote_user)],
)
def send_template_notification(
    payload: SendTemplateIn,
    token: str = Depends(require_token),
    svc: NotificationService = Depends(get_notification_service),
):
    notification = svc.send_template(payload, token)
    return {
        "success": True,
        "message": "Template notification sent successfully",
        "data": NotificationOut.model_validate(notification),
    }


@router.get("", response_model=ApiResponse[list[NotificationOut]])
def list_notifications(
    user: dict = Depends(get_remote_user),
    svc: NotificationService = Depends(get_notification_service),
):
    notifications = [NotificationOut.model_validate(n) for n in svc.list_notifications(user["id"])]
    return {"success": True, "data": notifications, "count": len(notifications)}


@router.get(
    "/templates",
    response_model=ApiResponse[list[TemplateOut]],
    dependencies=[Depends(get_remote_user)],
)
def list_templates(
    svc: NotificationService = Depends(get_notification_service),
):
    templates = [TemplateOut.model_validate(t) for t in svc.list_templates()]
    return {"success": True, "data": templates, "count": len(templates)}


@router.post(
    "/templates",
    response_model=ApiResponse[TemplateOut],
    status_code=201,
    dependencies=[Depends(get_remote_user)],
)
def create_template(
    payload: TemplateCreateIn,
    svc: NotificationService = Depends(get_notification_service),
):
    template = svc.create_template(payload)
    return {
        "success": True,
        "message": "Template created successfully",
        "data": TemplateOut.model_validate(template),
    }


@router.post("/events", response_model=ApiResponse[None])
def process_event(
    payload: EventIn,
    svc: NotificationService = Depends(get_notification_service),
):
    """Webhook bez uwierzytelniania."""
    svc.process_event(payload.event_type, payload.user_id, payload.data)
    return {"success": True, "message": "Event processed successfully"}


@router.get("/stats", response_model=ApiResponse[NotificationStatsOut])
def notification_stats(
    user: dict = Depends(get_remote_user),
    svc: NotificationService = Depends(get_notification_service),
):
    return {"success": True, "data": NotificationStatsOut(**svc.stats(user["id"]))}
