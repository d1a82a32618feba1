# server/core/security.py

from datetime import datetime, timedelta, timezone
from jose import jwt
from core.config import ACCESS_TOKEN_SECRET


ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_DAYS = 7


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """
    Signs the given claims into a bearer token.
    Adds `iat` and `exp`; tokens expire after 7 days unless told otherwise.
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, ACCESS_TOKEN_SECRET, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Verifies the signature and expiry of a token and returns its claims.
    Raises `jose.JWTError` (or its subclass `ExpiredSignatureError`) on failure.
    """
    return jwt.decode(token, ACCESS_TOKEN_SECRET, algorithms=[ALGORITHM])
