"""
Authentication dependencies for FastAPI.

This module provides the dependency that protects mutating routes with JWT
authentication.
"""

from typing import Optional
from fastapi import Header, Request
from parcelly.app.core.exceptions import AuthenticationError
from parcelly.app.core.jwt import decode_access_token


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the credential part of an `Authorization: Bearer <token>` value."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2:
        return None
    return parts[1]


async def require_auth(
    request: Request,
    authorization: Optional[str] = Header(default=None)
) -> dict:
    """
    FastAPI dependency for JWT authentication.

    Checks:
    1. Authorization header is present
    2. It carries a second, token part
    3. Token signature and expiry are valid

    The decoded claims are attached to `request.state.claims` and returned.

    Raises:
        AuthenticationError: 401 if any check fails
    """
    if authorization is None:
        raise AuthenticationError("Unauthorized access")

    token = extract_bearer_token(authorization)
    if token is None:
        raise AuthenticationError("Unauthorized access")

    payload = decode_access_token(token)
    if payload is None:
        raise AuthenticationError("Unauthorized access")

    request.state.claims = payload
    return payload
