# /jiujitsu_hub/core/security.py

"""
Cryptographic helpers for the authentication flow.

- Passwords are hashed with bcrypt.
- Access tokens are short-lived HS256 JWTs carrying the user's identity claims.
- Refresh tokens are opaque random strings; their validity lives in the
  database (`users.refreshToken` / `users.refreshTokenExpiresAt`), not in the
  token itself.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

import bcrypt
import jwt

from .config import (
    JWT_SECRET,
    JWT_ALGORITHM,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    REFRESH_TOKEN_EXPIRE_DAYS,
)


# --- Passwords ---

def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash stored in the database.
        return False


# --- Access Tokens ---

def create_access_token(claims: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Signs the identity claims `{id, email, role, academyId, studentId, name}`
    into a JWT that expires after ACCESS_TOKEN_EXPIRE_MINUTES.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {**claims, "iat": now, "exp": expire}
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verifies signature and expiry. Raises `jwt.InvalidTokenError` (which
    includes `jwt.ExpiredSignatureError`) on any failure.
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])


def decode_access_token_unverified_expiry(token: str) -> Dict[str, Any]:
    """
    Verifies the signature but ignores expiry. Used by logout, which must work
    with a token that has already expired.
    """
    return jwt.decode(
        token, JWT_SECRET, algorithms=[JWT_ALGORITHM], options={"verify_exp": False}
    )


# --- Refresh Tokens ---

def create_refresh_token() -> Tuple[str, datetime]:
    """Returns a new opaque refresh token and the moment it stops being valid."""
    token = secrets.token_urlsafe(48)
    expires_at = datetime.now(timezone.utc) + timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)
    return token, expires_at
