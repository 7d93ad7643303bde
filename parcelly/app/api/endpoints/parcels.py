"""
Parcel API Endpoints.

Booking, tracking and status changes for parcels. Every mutating route
requires a valid token.
"""

from typing import Any, Dict, List

from bson import ObjectId
from fastapi import APIRouter, Depends, Path

from parcelly.app.core.dependencies import require_auth
from parcelly.app.core.exceptions import ResourceNotFoundError
from parcelly.app.core.identifiers import valid_object_id
from parcelly.app.models.enums import UpdateMode
from parcelly.app.schemas.common import DeleteResponse, InsertResponse, StatusMessage, UpdateResponse
from parcelly.app.schemas.parcel import ParcelCreate, ParcelMerge, ParcelUpdate
from parcelly.app.services.audit import AuditAction, actor_from_claims, log_event
from parcelly.app.services.parcel_store import ParcelStore, get_parcel_store
from parcelly.app.services.user_store import UserStore, get_user_store

router = APIRouter(prefix="/parcel", tags=["Parcels"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_parcels(parcels: ParcelStore = Depends(get_parcel_store)):
    """List every parcel."""
    return await parcels.list_all()


@router.get("/g/{id}", response_model=Dict[str, Any])
async def get_parcel(
    oid: ObjectId = Depends(valid_object_id),
    parcels: ParcelStore = Depends(get_parcel_store)
):
    """Get a single parcel by ID, 404 if it does not exist."""
    return await parcels.get(oid)


@router.get("/delivery/{email}", response_model=List[Dict[str, Any]])
async def list_delivery_man_parcels(
    email: str = Path(..., description="Delivery man's email"),
    parcels: ParcelStore = Depends(get_parcel_store),
    users: UserStore = Depends(get_user_store)
):
    """
    List parcels assigned to the delivery man with this email.

    Unknown emails yield an empty list.
    """
    user = await users.find_by_email(email)
    if user is None:
        return []
    return await parcels.list_for_delivery_man(str(user["_id"]))


@router.get("/{email}", response_model=List[Dict[str, Any]])
async def list_user_parcels(
    email: str = Path(..., description="Owner email"),
    parcels: ParcelStore = Depends(get_parcel_store)
):
    """List parcels booked by a user."""
    return await parcels.list_by_owner(email)


@router.post("", response_model=InsertResponse)
async def create_parcel(
    parcel_data: ParcelCreate,
    claims: dict = Depends(require_auth),
    parcels: ParcelStore = Depends(get_parcel_store)
):
    """Book a new parcel. The body is stored as sent."""
    result = await parcels.create(parcel_data.to_document())

    log_event(
        action=AuditAction.PARCEL_CREATED,
        actor=actor_from_claims(claims),
        metadata={"parcel_id": str(result.inserted_id)}
    )

    return InsertResponse.from_result(result)


@router.delete("/{id}", response_model=DeleteResponse)
async def delete_parcel(
    oid: ObjectId = Depends(valid_object_id),
    claims: dict = Depends(require_auth),
    parcels: ParcelStore = Depends(get_parcel_store)
):
    result = await parcels.delete(oid)

    log_event(
        action=AuditAction.PARCEL_DELETED,
        actor=actor_from_claims(claims),
        metadata={"parcel_id": str(oid), "deleted": result.deleted_count}
    )

    return DeleteResponse.from_result(result)


@router.put("/u/{id}", response_model=StatusMessage)
async def assign_delivery_man(
    assignment: ParcelMerge,
    oid: ObjectId = Depends(valid_object_id),
    claims: dict = Depends(require_auth),
    parcels: ParcelStore = Depends(get_parcel_store)
):
    """
    Assign a delivery man (and any other fields) to a parcel.

    Full merge with upsert: a missing parcel is created with these fields.
    """
    result = await parcels.update(oid, assignment.to_fields(), UpdateMode.FULL_MERGE, upsert=True)

    if result.matched_count == 0 and result.upserted_id is None:
        raise ResourceNotFoundError("Parcel", str(oid))

    log_event(
        action=AuditAction.PARCEL_ASSIGNED,
        actor=actor_from_claims(claims),
        metadata={
            "parcel_id": str(oid),
            "delivery_man_id": assignment.delivery_man_id,
            "upserted": result.upserted_id is not None
        }
    )

    return StatusMessage(success=True, message="Updated successfully")


@router.patch("/gone/{id}", response_model=UpdateResponse)
async def mark_parcel_gone(
    changes: ParcelMerge,
    oid: ObjectId = Depends(valid_object_id),
    claims: dict = Depends(require_auth),
    parcels: ParcelStore = Depends(get_parcel_store)
):
    """Merge arbitrary fields into a picked-up parcel (no status lock)."""
    fields = changes.to_fields()
    result = await parcels.update(oid, fields, UpdateMode.FULL_MERGE)

    log_event(
        action=AuditAction.PARCEL_GONE,
        actor=actor_from_claims(claims),
        metadata={"parcel_id": str(oid), "updated_fields": list(fields.keys())}
    )

    return UpdateResponse.from_result(result)


@router.patch("/cancel/{id}", response_model=UpdateResponse)
async def cancel_parcel(
    oid: ObjectId = Depends(valid_object_id),
    claims: dict = Depends(require_auth),
    parcels: ParcelStore = Depends(get_parcel_store)
):
    """Set a parcel's status to "canceled"."""
    result = await parcels.cancel(oid)

    log_event(
        action=AuditAction.PARCEL_CANCELLED,
        actor=actor_from_claims(claims),
        metadata={"parcel_id": str(oid), "matched": result.matched_count}
    )

    return UpdateResponse.from_result(result)


@router.patch("/{id}", response_model=UpdateResponse)
async def update_parcel(
    parcel_data: ParcelUpdate,
    oid: ObjectId = Depends(valid_object_id),
    claims: dict = Depends(require_auth),
    parcels: ParcelStore = Depends(get_parcel_store)
):
    """
    Edit a booked parcel's details.

    Only the allow-listed booking fields are written.
    Parcels already "On The Way" cannot be edited (403).
    """
    fields = parcel_data.to_fields()
    result = await parcels.update_guarded(oid, fields)

    log_event(
        action=AuditAction.PARCEL_UPDATED,
        actor=actor_from_claims(claims),
        metadata={"parcel_id": str(oid), "updated_fields": list(fields.keys())}
    )

    return UpdateResponse.from_result(result)
