"""
Parcel Pydantic schemas.

Parcels are free-form documents. Known fields are declared for the API docs
only and are stored exactly as the client sent them, with no coercion.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class ParcelCreate(BaseModel):
    """Schema for booking a new parcel."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    email: Optional[Any] = Field(None, description="Owner email")
    name: Optional[Any] = Field(None, description="Owner name")
    phone: Optional[Any] = Field(None, description="Owner phone number")
    parcel_type: Optional[Any] = Field(None, alias="parcelType")
    weight: Optional[Any] = Field(None, alias="Weight", description="Weight, e.g. 2.5 or \"2 kg\"")
    receiver_name: Optional[Any] = Field(None, alias="receiverName")
    receiver_no: Optional[Any] = Field(None, alias="receiverNo", description="Receiver phone number")
    address: Optional[Any] = Field(None, description="Delivery address")
    requested_date: Optional[Any] = Field(None, alias="requestedDate")
    latitude: Optional[Any] = None
    longitude: Optional[Any] = None
    price: Optional[Any] = None
    status: Optional[Any] = None

    def to_document(self) -> Dict[str, Any]:
        """Only what the client actually sent, under its wire names."""
        return self.model_dump(exclude_unset=True, by_alias=True)


class ParcelUpdate(BaseModel):
    """
    Schema for the structured (allow-listed) parcel update.

    Fields outside the allow-list are dropped; values are written as sent.
    """
    model_config = ConfigDict(populate_by_name=True)

    parcel_type: Optional[Any] = Field(None, alias="parcelType")
    weight: Optional[Any] = Field(None, alias="Weight")
    receiver_name: Optional[Any] = Field(None, alias="receiverName")
    receiver_no: Optional[Any] = Field(None, alias="receiverNo")
    address: Optional[Any] = None
    latitude: Optional[Any] = None
    longitude: Optional[Any] = None
    price: Optional[Any] = None
    status: Optional[Any] = None

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, by_alias=True)


class ParcelMerge(BaseModel):
    """
    Schema for merge-style updates (delivery man assignment, "gone").

    Any field is accepted and merged into the stored parcel.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    delivery_man_id: Optional[Any] = Field(None, alias="deliveryManId")
    approximate_delivery_date: Optional[Any] = Field(None, alias="approximateDeliveryDate")
    status: Optional[Any] = None

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, by_alias=True)
