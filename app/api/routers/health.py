# app/api/routers/health.py
from datetime import datetime, timezone
from typing import Callable

from fastapi import APIRouter, Request


def build_router(service_name: str, extra: Callable[[Request], dict] | None = None) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/health")
    def health(request: Request):
        body = {
            "status": "healthy",
            "service": service_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if extra:
            body.update(extra(request))
        return body

    return router
