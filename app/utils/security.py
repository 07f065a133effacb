# app/utils/security.py
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.utils.settings import BCRYPT_ROUNDS, JWT_ALGORITHM, JWT_EXPIRES_HOURS, JWT_SECRET

# bcrypt bierze pod uwage tylko pierwsze 72 bajty
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # uszkodzony hash w magazynie
        return False


def create_access_token(
    claims: dict,
    secret: str = JWT_SECRET,
    expires_in: timedelta = timedelta(hours=JWT_EXPIRES_HOURS),
) -> str:
    payload = dict(claims)
    payload["exp"] = datetime.now(timezone.utc) + expires_in
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, secret: str = JWT_SECRET) -> dict:
    """Rzuca jwt.InvalidTokenError gdy token jest zly albo wygasl."""
    return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
