"""
Access token signing and verification.

Tokens carry whatever claims the web client posted to /jwt (usually just the
signed-in email) plus `iat` and `exp`.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from parcelly.app.core.config import settings


def token_lifetime() -> timedelta:
    return timedelta(minutes=settings.access_token_expire_minutes)


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign `claims` with the shared secret.

    `expires_delta` defaults to the configured lifetime (one hour). Caller
    supplied `iat`/`exp` claims are overwritten.
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = token_lifetime() if expires_delta is None else expires_delta

    payload = {**claims, "iat": issued_at, "exp": issued_at + lifetime}
    return jwt.encode(payload, settings.access_token_secret, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verified claims, or None for a bad signature, expired or garbled token."""
    try:
        return jwt.decode(token, settings.access_token_secret, algorithms=[settings.algorithm])
    except JWTError:
        return None
