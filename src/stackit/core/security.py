"""Password hashing and access-token helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import jwt

from stackit.core.settings import settings


def hash_password(password: str) -> str:
    """Return a bcrypt hash of ``password`` using the configured cost factor."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash.

    Returns:
        True when the password matches; False otherwise, including for
        malformed hashes.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user_id: int, role: str, extra_claims: dict[str, Any] | None = None) -> str:
    """Create a JWT access token carrying the user id and role."""
    to_encode: dict[str, Any] = {"sub": str(user_id), "role": role}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and verify an access token.

    Raises:
        jose.JWTError: If the signature is invalid or the token has expired.
    """
    return jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.jwt_algorithm],
    )
