"""Verification of the bearer tokens issued by the marketplace's auth service."""

from jose import JWTError, jwt

from app.config import get_settings

ALGORITHM = "HS256"


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc
