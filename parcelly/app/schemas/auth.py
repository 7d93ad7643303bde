"""
Authentication Pydantic schemas.
"""

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """
    Schema for JWT token response.

    Returned by POST /jwt.
    """
    token: str = Field(..., description="Signed JWT, valid for one hour")
