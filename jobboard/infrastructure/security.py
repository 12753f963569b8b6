"""Bearer token helpers.

Tokens are issued by the accounts service; this module only needs to verify
them. ``create_access_token`` mirrors the issuer's format for operator
tooling and tests.
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from jobboard.config import get_settings

settings = get_settings()


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode(
        {**data, "exp": expire}, settings.secret_key, algorithm=settings.jwt_algorithm
    )


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc
