# app/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests

from app.utils.settings import HTTP_RETRY_ATTEMPTS


def http_retry(attempts: int | None = None):
    # domyslnie 1 proba - bez ponawiania wywolan miedzy serwisami
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts or HTTP_RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(requests.ConnectionError),
    )
