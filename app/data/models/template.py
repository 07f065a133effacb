import re
from dataclasses import dataclass, field
from datetime import datetime

from app.domain.enums import NotificationType


@dataclass
class TemplateModel:
    name: str
    type: NotificationType
    subject: str
    body: str
    variables: list[str] = field(default_factory=list)
    created_at: datetime | None = None

    def render(self, values: dict) -> tuple[str, str]:
        """Podstawia {{zmienna}} w temacie i tresci.

        Tylko zmienne zadeklarowane w ``variables``; brakujace (albo puste)
        wartosci zostawiaja placeholder bez zmian.
        """
        subject, body = self.subject, self.body
        for name in self.variables:
            value = values.get(name)
            replacement = str(value) if value not in (None, "") else "{{%s}}" % name
            pattern = re.compile(r"\{\{" + re.escape(name) + r"\}\}")
            subject = pattern.sub(lambda _m: replacement, subject)
            body = pattern.sub(lambda _m: replacement, body)
        return subject, body
