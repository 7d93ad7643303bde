"""
Audit logging service for tracking data changes.

Every store mutation emits one structured line on the `parcelly.audit` logger.
"""

import logging
from typing import Optional, Dict, Any

audit_logger = logging.getLogger("parcelly.audit")


# Audit event constants
class AuditAction:
    """Standardized audit action constants."""
    TOKEN_ISSUED = "TOKEN_ISSUED"

    # Parcels
    PARCEL_CREATED = "PARCEL_CREATED"
    PARCEL_DELETED = "PARCEL_DELETED"
    PARCEL_UPDATED = "PARCEL_UPDATED"
    PARCEL_ASSIGNED = "PARCEL_ASSIGNED"
    PARCEL_GONE = "PARCEL_GONE"
    PARCEL_CANCELLED = "PARCEL_CANCELLED"

    # Users
    USER_CREATED = "USER_CREATED"
    USER_UPSERTED = "USER_UPSERTED"
    ROLE_CHANGED = "ROLE_CHANGED"

    # Reviews
    REVIEW_CREATED = "REVIEW_CREATED"

    # Payments
    PAYMENT_INTENT_CREATED = "PAYMENT_INTENT_CREATED"


def actor_from_claims(claims: Optional[Dict[str, Any]]) -> Optional[str]:
    """Best identifier for whoever holds the token."""
    if not claims:
        return None
    return claims.get("email") or claims.get("sub")


def log_event(
    action: str,
    actor: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None
) -> None:
    """
    Record an audit event.

    Args:
        action: Action being performed (use AuditAction constants)
        actor: Email (or subject) of the caller, if authenticated
        metadata: Additional context
    """
    audit_logger.info(
        "%s actor=%s %s",
        action,
        actor or "anonymous",
        metadata or {},
        extra={"action": action, "actor": actor, "meta_data": metadata or {}},
    )
