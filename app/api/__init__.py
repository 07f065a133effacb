# app/api/__init__.py
from typing import Callable

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.metrics import HttpMetrics, install_metrics
from app.api.routers.health import build_router as build_health_router
from app.utils.logging import configure_logging


def create_service_app(
    service_name: str,
    title: str,
    routers: list[APIRouter],
    health_extra: Callable[[Request], dict] | None = None,
) -> FastAPI:
    """Wspolny szkielet aplikacji: logi, CORS, metryki, bledy, /health."""
    configure_logging(service_name)

    app = FastAPI(title=title, version="1.0.0")
    app.state.service_name = service_name
    app.state.metrics = HttpMetrics()

    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    install_metrics(app, app.state.metrics)
    register_error_handlers(app)

    app.include_router(build_health_router(service_name, health_extra))
    for router in routers:
        app.include_router(router)

    return app
