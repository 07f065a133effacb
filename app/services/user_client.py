# app/services/user_client.py
import requests
from requests import RequestException

from app.domain.errors import AuthenticationError, NotFoundError, UpstreamServiceError
from app.utils.retry import http_retry
from app.utils.settings import HTTP_TIMEOUT_SECONDS, USER_SERVICE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserClient:
    """Klient HTTP do user-service: weryfikacja tokenow i profil."""

    def __init__(self, base_url: str | None = None, timeout: float | None = HTTP_TIMEOUT_SECONDS):
        self.base_url = (base_url or USER_SERVICE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    @http_retry()
    def _post_verify(self, token: str) -> requests.Response:
        return self.session.post(
            f"{self.base_url}/api/users/verify",
            json={"token": token},
            timeout=self.timeout,
        )

    def verify_token(self, token: str) -> dict:
        """Zwraca {id, email, role} albo rzuca AuthenticationError."""
        try:
            resp = self._post_verify(token)
        except RequestException as e:
            logger.warning(f"Token verification call failed: {e}")
            raise AuthenticationError("Token verification failed") from e

        if resp.status_code in (400, 401):
            raise AuthenticationError("Invalid token")
        if not resp.ok:
            logger.warning(f"user-service verify returned {resp.status_code}")
            raise AuthenticationError("Token verification failed")

        body = resp.json()
        if not body.get("success"):
            raise AuthenticationError("Invalid token")
        return body["data"]

    @http_retry()
    def _get_profile(self, token: str) -> requests.Response:
        return self.session.get(
            f"{self.base_url}/api/users/profile",
            headers={"Authorization": f"Bearer {token}"},
            timeout=self.timeout,
        )

    def get_profile(self, token: str) -> dict:
        try:
            resp = self._get_profile(token)
        except RequestException as e:
            logger.error(f"user-service unreachable: {e}")
            raise UpstreamServiceError("user-service") from e

        if resp.status_code == 404:
            raise NotFoundError("User not found")
        if resp.status_code in (401, 403):
            raise AuthenticationError("Invalid token")
        if not resp.ok:
            raise UpstreamServiceError("user-service", f"user-service returned {resp.status_code}")

        body = resp.json()
        if not body.get("success"):
            raise NotFoundError("User not found")
        return body["data"]
