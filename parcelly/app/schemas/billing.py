"""
Payment Schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class PaymentIntentCreate(BaseModel):
    """Schema for requesting a card payment intent."""
    price: float = Field(..., description="Amount in major currency units, e.g. 12.50")


class PaymentIntentResponse(BaseModel):
    """Client secret the browser uses to confirm the card payment."""
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(..., alias="clientSecret")
