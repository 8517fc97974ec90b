"""JWT identity token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel, ValidationError

from ..config import get_settings
from ..core.exceptions import ConfigurationError, ExpiredTokenError, InvalidTokenError


class TokenPayload(BaseModel):
    """Claims carried by an identity token."""

    id: int
    email: str
    iat: Optional[int] = None
    exp: Optional[int] = None


def _require_secret(settings) -> str:
    if not settings.jwt_secret:
        raise ConfigurationError("JWT secret is not configured")
    return settings.jwt_secret


def create_access_token(identity: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token for ``{"id", "email"}``."""
    settings = get_settings()
    secret = _require_secret(settings)

    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "id": identity["id"],
        "email": identity["email"],
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(to_encode, secret, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenPayload:
    """Verify signature and expiry and return the embedded identity."""
    settings = get_settings()
    secret = _require_secret(settings)

    try:
        payload = jwt.decode(token, secret, algorithms=[settings.algorithm])
    except ExpiredSignatureError as e:
        raise ExpiredTokenError() from e
    except JWTError as e:
        raise InvalidTokenError() from e

    try:
        return TokenPayload(
            id=payload["id"],
            email=payload["email"],
            iat=payload.get("iat"),
            exp=payload.get("exp"),
        )
    except (KeyError, ValidationError) as e:
        raise InvalidTokenError() from e


def token_lifetime_seconds(expires_delta: Optional[timedelta] = None) -> int:
    if expires_delta is not None:
        return int(expires_delta.total_seconds())
    return get_settings().access_token_expire_minutes * 60
