from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from doctors_portal.core.config import settings


def create_access_token(email: str, expires_delta: timedelta | None = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(UTC) + expires_delta
    to_encode = {"email": email, "exp": expire, "type": "access"}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> str | None:
    """Returns the email claim of a valid access token, otherwise None."""
    try:
        payload = jwt.decode(
            token, settings.secret_key, algorithms=[settings.algorithm]
        )
        if payload.get("type") != "access":
            return None
        email = payload.get("email")
        return str(email) if email else None
    except JWTError:
        return None
