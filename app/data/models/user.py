from dataclasses import dataclass, field
from datetime import datetime, timezone

from app.domain.enums import Role


@dataclass
class UserModel:
    id: int
    email: str
    password_hash: str
    first_name: str
    last_name: str
    role: Role = Role.CUSTOMER
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
