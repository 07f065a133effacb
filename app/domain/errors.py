"""Wyjatki domenowe wspolne dla wszystkich serwisow.

Kazda klasa niesie swoj kod HTTP, handler w app.api.errors zamienia je na
koperte ``{"success": false, "message": ...}``.
"""


class ServiceError(Exception):
    """Bazowy wyjatek dla bledow biznesowych."""

    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationFailed(ServiceError):
    status_code = 400


class AuthenticationError(ServiceError):
    status_code = 401


class ForbiddenError(ServiceError):
    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 409


class UpstreamServiceError(ServiceError):
    """Inny serwis nie odpowiedzial albo zwrocil cos nieoczekiwanego."""

    status_code = 502

    def __init__(self, service: str, message: str | None = None):
        self.service = service
        super().__init__(message or f"{service} is unavailable")
