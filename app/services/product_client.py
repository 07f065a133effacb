# app/services/product_client.py
import requests
from requests import RequestException

from app.domain.errors import NotFoundError, UpstreamServiceError
from app.utils.retry import http_retry
from app.utils.settings import HTTP_TIMEOUT_SECONDS, PRODUCT_SERVICE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    """Klient HTTP do product-service."""

    def __init__(self, base_url: str | None = None, timeout: float | None = HTTP_TIMEOUT_SECONDS):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    @http_retry()
    def _get(self, path: str) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.info(f"ProductClient GET {url}")
        return self.session.get(url, timeout=self.timeout)

    def fetch_product(self, product_id: int) -> dict:
        try:
            resp = self._get(f"/api/products/{product_id}")
        except RequestException as e:
            logger.error(f"product-service unreachable: {e}")
            raise UpstreamServiceError("product-service") from e

        if resp.status_code == 404:
            raise NotFoundError("Product not found")
        if not resp.ok:
            raise UpstreamServiceError("product-service", f"product-service returned {resp.status_code}")

        body = resp.json()
        if not body.get("success"):
            raise NotFoundError("Product not found")
        return body["data"]

    def get_stock(self, product_id: int) -> int:
        return int(self.fetch_product(product_id)["stock"])

    def update_stock(self, product_id: int, quantity: int) -> dict:
        url = f"{self.base_url}/api/products/{product_id}/stock"
        logger.info(f"ProductClient PATCH {url} quantity={quantity}")
        try:
            resp = self.session.patch(url, json={"quantity": quantity}, timeout=self.timeout)
        except RequestException as e:
            logger.error(f"product-service unreachable: {e}")
            raise UpstreamServiceError("product-service") from e

        if resp.status_code == 404:
            raise NotFoundError("Product not found")
        if not resp.ok:
            raise UpstreamServiceError(
                "product-service",
                f"Stock update for product {product_id} failed with {resp.status_code}",
            )
        return resp.json()["data"]
