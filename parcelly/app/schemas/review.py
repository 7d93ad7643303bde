"""
Review Pydantic schemas.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class ReviewCreate(BaseModel):
    """Schema for reviewing a delivery man after a delivery."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    delivery_man_id: str = Field(..., alias="deliveryManId", description="Reviewed user's ID as string")
    rating: Optional[Any] = Field(None, description="Star rating, stored as sent")
    feedback: Optional[Any] = None
    reviewer_name: Optional[Any] = Field(None, alias="reviewerName")
    reviewer_email: Optional[Any] = Field(None, alias="reviewerEmail")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, by_alias=True)
