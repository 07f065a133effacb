# app/utils/logging.py
import logging
import os

from app.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s | %(levelname)-5s | %(service)s | %(name)s | %(message)s"


class ServiceFilter(logging.Filter):
    """Dokleja nazwe serwisu do kazdego rekordu."""

    def __init__(self, service: str):
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "service"):
            record.service = self.service
        return True


_filter = ServiceFilter(os.getenv("SERVICE_NAME", "shopmesh"))
_handler: logging.Handler | None = None


def configure_logging(service_name: str | None = None, level: str | None = None) -> ServiceFilter:
    """Jeden handler na proces; nazwa serwisu siedzi w filtrze, nie w os.environ."""
    global _handler

    if service_name:
        _filter.service = service_name

    root = logging.getLogger()
    root.setLevel((level or LOG_LEVEL).upper())

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
        _handler.addFilter(_filter)
        root.addHandler(_handler)
    return _filter


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
