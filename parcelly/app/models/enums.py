"""
User roles enumeration.

Defines the role values stored on user documents.
"""

import enum


class UserRole(str, enum.Enum):
    """
    User role enumeration.

    A user without a `role` field is a regular customer.

    Roles:
        DELIVERY_MAN: Picks up and delivers parcels, can be reviewed
        ADMIN: Manages users and parcel assignment
    """
    DELIVERY_MAN = "Delivery Man"
    ADMIN = "Admin"


class UpdateMode(str, enum.Enum):
    """
    How an update path writes caller-supplied fields.

    FULL_MERGE: every supplied field is merged into the document
    ALLOW_LISTED: only fields from a fixed schema are written
    """
    FULL_MERGE = "full_merge"
    ALLOW_LISTED = "allow_listed"
