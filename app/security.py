# app/security.py
"""
Password hashing and access token helpers.

Hashing is delegated to passlib (bcrypt), signing to PyJWT. Nothing here
touches the database.
"""

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.errors import UnauthorizedError


@lru_cache(maxsize=1)
def _pwd_context() -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().BCRYPT_ROUNDS,
    )


def hash_password(password: str) -> str:
    return _pwd_context().hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time compare of a plaintext password against a stored hash."""
    try:
        return _pwd_context().verify(password, password_hash)
    except ValueError:
        # Malformed or unknown hash format stored for this account
        return False


def create_access_token(
    account_id: int,
    email: str,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Sign a bearer token carrying the account id, email and role.

    Tokens are stateless; there is no revocation list.
    """
    settings = get_settings()
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": str(account_id),
        "email": email,
        "role": role,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify a bearer token and return its claims.

    Raises UnauthorizedError for expired, tampered or malformed tokens.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid token")

    if not payload.get("sub") or not payload.get("email"):
        raise UnauthorizedError("Invalid token payload")
    return payload
