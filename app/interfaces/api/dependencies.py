"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.domain.entities import ROLE_CLIENT, ROLE_PROVIDER, Identity
from app.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")

_KNOWN_ROLES = {ROLE_CLIENT, ROLE_PROVIDER}


def _credentials_error(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_identity(token: str) -> Identity:
    """Resolve the caller identity carried by ``token``."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    user_id = payload.get("sub")
    role = payload.get("role")
    if not isinstance(user_id, str) or not user_id:
        raise _credentials_error()
    if not isinstance(role, str) or role.lower() not in _KNOWN_ROLES:
        raise _credentials_error("Unknown account role")

    return Identity(user_id=user_id, role=role.lower())


def get_current_identity(token: str = Depends(oauth2_scheme)) -> Identity:
    """Return the authenticated caller from the bearer token."""

    return resolve_identity(token)
