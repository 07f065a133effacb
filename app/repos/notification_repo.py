# app/repos/notification_repo.py
from app.data.models.notification import NotificationModel
from app.data.models.template import TemplateModel


class NotificationRepo:
    def __init__(self, notifications: list[NotificationModel] | None = None):
        self.notifications = notifications if notifications is not None else []

    def add(self, notification: NotificationModel) -> NotificationModel:
        self.notifications.append(notification)
        return notification

    def list_for_user(self, user_id: int) -> list[NotificationModel]:
        return [n for n in self.notifications if n.user_id == user_id]

    def count(self) -> int:
        return len(self.notifications)


class TemplateRepo:
    """Szablony po nazwie, nazwa jest unikalna."""

    def __init__(self, templates: list[TemplateModel] | None = None):
        self.templates: dict[str, TemplateModel] = {t.name: t for t in templates or []}

    def get(self, name: str) -> TemplateModel | None:
        return self.templates.get(name)

    def exists(self, name: str) -> bool:
        return name in self.templates

    def add(self, template: TemplateModel) -> TemplateModel:
        self.templates[template.name] = template
        return template

    def list_templates(self) -> list[TemplateModel]:
        return list(self.templates.values())
