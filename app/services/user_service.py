# app/services/user_service.py
import jwt
from prometheus_client import Counter

from app.data.models.user import UserModel
from app.domain.enums import Role
from app.domain.errors import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationFailed,
)
from app.domain.schemas import ProfileUpdateIn, RegisterIn
from app.repos.user_repo import UserRepo
from app.utils import security
from app.utils.logging import get_logger
from app.utils.settings import JWT_SECRET

logger = get_logger(__name__)


class UserService:
    """
    Rejestracja, logowanie, profil i weryfikacja tokenow.
    Tokeny weryfikuje lokalnie, inne serwisy pytaja przez /api/users/verify.
    """

    def __init__(
        self,
        repo: UserRepo,
        jwt_secret: str = JWT_SECRET,
        auth_attempts: Counter | None = None,
    ):
        self.repo = repo
        self.jwt_secret = jwt_secret
        self.auth_attempts = auth_attempts

    def _track(self, kind: str, status: str) -> None:
        if self.auth_attempts is not None:
            self.auth_attempts.labels(kind, status).inc()

    def register(self, payload: RegisterIn) -> UserModel:
        if self.repo.get_by_email(payload.email):
            self._track("register", "failed")
            logger.warning(f"Registration rejected, email already used: {payload.email}")
            raise ConflictError("User already exists with this email")

        user = UserModel(
            id=self.repo.next_id(),
            email=payload.email,
            password_hash=security.hash_password(payload.password),
            first_name=payload.first_name,
            last_name=payload.last_name,
            role=Role.CUSTOMER,
        )
        self.repo.create_user(user)
        self._track("register", "success")

        logger.info(f"New user registered {user.email} (id={user.id})")
        return user

    def login(self, email: str, password: str) -> tuple[UserModel, str]:
        user = self.repo.get_by_email(email)
        if not user:
            self._track("login", "failed")
            raise AuthenticationError("Invalid email or password")

        if not user.is_active:
            self._track("login", "failed")
            raise AuthenticationError("Account is deactivated")

        if not security.check_password(password, user.password_hash):
            self._track("login", "failed")
            raise AuthenticationError("Invalid email or password")

        token = security.create_access_token(
            {"id": user.id, "email": user.email, "role": user.role.value},
            secret=self.jwt_secret,
        )
        self._track("login", "success")
        logger.info(f"User login successful {user.email} (id={user.id})")
        return user, token

    def decode_token(self, token: str) -> dict:
        try:
            return security.decode_access_token(token, secret=self.jwt_secret)
        except jwt.InvalidTokenError:
            raise ForbiddenError("Invalid or expired token")

    def get_profile(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, user_id: int, payload: ProfileUpdateIn) -> UserModel:
        user = self.get_profile(user_id)

        #puste wartosci ignorujemy
        if payload.first_name:
            user.first_name = payload.first_name
        if payload.last_name:
            user.last_name = payload.last_name

        logger.info(f"User profile updated {user.email} (id={user.id})")
        return user

    def list_users(self, role: str) -> list[UserModel]:
        if role != Role.ADMIN.value:
            raise ForbiddenError("Admin access required")
        return self.repo.list_users()

    def verify_token(self, token: str | None) -> UserModel:
        """Use case dla innych serwisow: token -> aktywny uzytkownik."""
        if not token:
            raise ValidationFailed("Token required")

        try:
            claims = security.decode_access_token(token, secret=self.jwt_secret)
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")

        user = self.repo.get_user(claims.get("id"))
        if not user or not user.is_active:
            raise AuthenticationError("User not found or inactive")
        return user
