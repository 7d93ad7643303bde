"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Known parcel status values.

    Status is stored as free text, so documents may carry other values.

    Status flow:
        pending → On The Way → delivered
        Any status can transition to canceled
    """
    PENDING = "pending"
    ON_THE_WAY = "On The Way"
    DELIVERED = "delivered"
    CANCELED = "canceled"


# Fields the structured parcel update may write
PARCEL_EDITABLE_FIELDS = (
    "parcelType",
    "Weight",
    "receiverName",
    "receiverNo",
    "address",
    "latitude",
    "longitude",
    "price",
    "status",
)
