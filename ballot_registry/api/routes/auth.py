"""Bearer token handling; the token subject is the caller's identity."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

from ballot_registry.core.config import Settings, get_settings

security_scheme = HTTPBearer(auto_error=True)


class TokenPayload(BaseModel):
    sub: str
    iat: datetime
    exp: datetime
    jti: str


def create_access_token(
    identity: str,
    *,
    settings: Settings | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign an access token asserting ``identity``."""

    settings = settings or get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    now = datetime.now(UTC)
    payload = {
        "sub": identity,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
        "jti": uuid4().hex,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def _decode_token(*, token: str, settings: Settings) -> TokenPayload:
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        ) from exc
    try:
        validated = TokenPayload(**payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        ) from exc
    return validated


def get_current_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security_scheme),
) -> str:
    settings = get_settings()
    payload = _decode_token(token=credentials.credentials, settings=settings)
    return payload.sub


__all__ = ["TokenPayload", "create_access_token", "get_current_identity"]
