# app/user_service/main.py
import uvicorn
from fastapi import FastAPI

from app.api import create_service_app
from app.api.routers import users
from app.data.models.user import UserModel
from app.data.seed import seed_users
from app.repos.user_repo import UserRepo
from app.utils.settings import DEFAULT_JWT_SECRET, ENVIRONMENT, JWT_SECRET, USER_SERVICE_PORT
from app.utils.logging import get_logger

logger = get_logger(__name__)


def check_jwt_secret(secret: str, environment: str = ENVIRONMENT) -> None:
    if secret != DEFAULT_JWT_SECRET:
        return
    if environment == "production":
        logger.error("CRITICAL: Using default JWT secret in production!")
        raise RuntimeError("Default JWT secret is not allowed in production")
    logger.warning("Missing environment variable: JWT_SECRET. Using default value.")


def create_app(users_seed: list[UserModel] | None = None, jwt_secret: str = JWT_SECRET) -> FastAPI:
    check_jwt_secret(jwt_secret)

    app = create_service_app("user-service", "User Service", [users.router])
    app.state.user_repo = UserRepo(seed_users() if users_seed is None else users_seed)
    app.state.jwt_secret = jwt_secret
    app.state.auth_attempts = app.state.metrics.counter(
        "auth_attempts_total",
        "Total number of authentication attempts",
        ["type", "status"],
    )
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=USER_SERVICE_PORT)
