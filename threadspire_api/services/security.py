# threadspire_api/services/security.py

"""
Password hashing (Argon2) and bearer token (JWT) primitives.

Kept free of any database access so it can be unit-tested on its own; the
``AuthService`` combines these with the users repository.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from jose import JWTError, jwt

from threadspire_api.config import Settings, get_config

from .errors import AuthenticationError

_hasher = PasswordHasher()


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """
    Return True if ``password`` matches ``password_hash``.
    Malformed hashes count as a mismatch.
    """
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


def create_access_token(
    subject: int,
    *,
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Issue a signed JWT whose ``sub`` claim is the user id.
    """
    settings = settings or get_config()
    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    claims: Dict[str, Any] = {
        "sub": str(subject),
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, *, settings: Optional[Settings] = None) -> int:
    """
    Validate ``token`` and return the user id it was issued for.

    Raises ``AuthenticationError`` for a bad signature, an expired token or
    a malformed subject.
    """
    settings = settings or get_config()
    try:
        claims = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError as exc:
        raise AuthenticationError("Invalid or expired token.") from exc

    subject = claims.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError) as exc:
        raise AuthenticationError("Token subject is not a user id.") from exc


__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
]
