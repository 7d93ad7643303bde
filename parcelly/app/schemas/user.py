"""
User Pydantic schemas.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class UserCreate(BaseModel):
    """
    Schema for a user profile document.

    Profile fields come from the client's sign-in provider and are stored as sent.
    """
    model_config = ConfigDict(extra="allow")

    email: Optional[Any] = Field(None, description="User email address")
    name: Optional[Any] = Field(None, description="Display name")
    photo: Optional[Any] = Field(None, description="Avatar URL")
    role: Optional[Any] = Field(None, description="Role, unset for customers")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class UserUpsert(UserCreate):
    """Schema for first sign-in, keyed by email."""
    email: str = Field(..., min_length=1, description="User email address")
