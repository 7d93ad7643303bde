"""
Authentication API endpoints.

Issues the signed token that mutating routes require.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body

from parcelly.app.core.jwt import create_access_token
from parcelly.app.schemas.auth import TokenResponse
from parcelly.app.services.audit import AuditAction, actor_from_claims, log_event

router = APIRouter(tags=["Authentication"])


@router.post("/jwt", response_model=TokenResponse)
async def issue_token(claims: Dict[str, Any] = Body(..., examples=[{"email": "someone@example.com"}])):
    """
    Sign the posted claims into a one-hour JWT.

    The client calls this right after signing in with its identity provider.
    """
    token = create_access_token(claims)

    log_event(action=AuditAction.TOKEN_ISSUED, actor=actor_from_claims(claims))

    return TokenResponse(token=token)
