"""JWT issuance and verification using python-jose.

Tokens are stateless: nothing about an issued token is stored server-side and
the only way a token stops working is expiry (or its subject disappearing).
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from jose import JWTError, jwt

from myflix.application.errors import ExpiredTokenError, InvalidSignatureError
from myflix.config import get_settings
from myflix.domain.identity.entities import User


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_at: datetime


@dataclass(frozen=True)
class TokenClaims:
    user_id: UUID
    username: str
    issued_at: datetime
    expires_at: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(user: User) -> IssuedToken:
    """Sign a bearer token for ``user``. Only id and username go in the payload."""
    settings = get_settings()
    # JWT timestamps are whole seconds
    issued_at = _utcnow().replace(microsecond=0)
    expires_at = issued_at + timedelta(days=settings.jwt_access_token_expire_days)

    payload: dict[str, Any] = {
        "sub": str(user.id),
        "username": str(user.username),
        "iat": issued_at,
        "exp": expires_at,
    }
    token = jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)
    return IssuedToken(token=token, expires_at=expires_at)


def decode_access_token(token: str) -> TokenClaims:
    """Check signature, then expiry. Raises InvalidSignatureError or ExpiredTokenError.

    Nothing in the payload is read before the signature has been verified.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"verify_exp": False, "require_exp": True, "require_sub": True},
        )
    except JWTError as exc:
        raise InvalidSignatureError("Token signature is invalid") from exc

    try:
        expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
        issued_at = datetime.fromtimestamp(int(payload.get("iat", 0)), tz=timezone.utc)
        user_id = UUID(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidSignatureError("Token payload is malformed") from exc

    if expires_at <= _utcnow():
        raise ExpiredTokenError("Token has expired")

    return TokenClaims(
        user_id=user_id,
        username=str(payload.get("username", "")),
        issued_at=issued_at,
        expires_at=expires_at,
    )
