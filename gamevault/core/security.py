# gamevault/core/security.py

from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from gamevault.config import Settings
from gamevault.errors import AuthenticationError


def create_password_context(rounds: int = 10) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def get_password_hash(pwd_context: CryptContext, password: str) -> str:
    return pwd_context.hash(password)


def verify_password(pwd_context: CryptContext, plain_password: str, hashed_password: str) -> bool:
    # bcrypt rejects some secrets outright (NUL bytes, oversize); none of them can match
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_access_token(settings: Settings, data: dict, expires_delta: timedelta | None = None) -> str:
    """
    Signs `data` into a JWT. The expiry defaults to the configured
    token lifetime; the token itself is never stored.
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(settings: Settings, token: str | None) -> dict:
    """
    Verifies signature and expiry and returns the identity claims.
    Raises AuthenticationError for a missing, malformed, expired or forged token.
    """
    if not token:
        raise AuthenticationError("Missing token")
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise AuthenticationError("Invalid token") from e

    if payload.get("id") is None or not payload.get("username"):
        raise AuthenticationError("Invalid token")
    return {"id": payload["id"], "username": payload["username"]}
