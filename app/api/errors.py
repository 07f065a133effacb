# app/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import ServiceError
from app.utils.logging import get_logger

logger = get_logger(__name__)


def envelope(status_code: int, message: str, details: str | None = None) -> JSONResponse:
    content = {"success": False, "message": message}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def _first_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    # pierwszy element loc to "body"/"query"/"path"
    loc = ".".join(str(p) for p in err.get("loc", ())[1:])
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


def register_error_handlers(app: FastAPI) -> None:
    """Wszystkie bledy wychodza w kopercie {success: false, message}."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path}: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return envelope(exc.status_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = _first_error(exc)
        logger.warning(f"Validation failed {request.method} {request.url.path}: {details}")
        return envelope(400, "Validation error", details)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # nieznana sciezka albo metoda - tak samo jak brak trasy
        if exc.status_code in (404, 405):
            return envelope(404, "Route not found")
        return envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return envelope(500, "Internal server error")
