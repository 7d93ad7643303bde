"""
User API Endpoints.

Profile registration on sign-in, role promotion and user lookup.
"""

from typing import Any, Dict, List

from bson import ObjectId
from fastapi import APIRouter, Depends, Path

from parcelly.app.core.dependencies import require_auth
from parcelly.app.core.identifiers import valid_object_id
from parcelly.app.models.enums import UserRole
from parcelly.app.schemas.common import InsertResponse, UpdateResponse
from parcelly.app.schemas.user import UserCreate, UserUpsert
from parcelly.app.services.audit import AuditAction, actor_from_claims, log_event
from parcelly.app.services.user_store import UserStore, get_user_store

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=InsertResponse)
async def create_user(
    user_data: UserCreate,
    claims: dict = Depends(require_auth),
    users: UserStore = Depends(get_user_store)
):
    """Insert a user document as sent."""
    result = await users.create(user_data.to_document())

    log_event(
        action=AuditAction.USER_CREATED,
        actor=actor_from_claims(claims),
        metadata={"user_id": str(result.inserted_id), "email": user_data.email}
    )

    return InsertResponse.from_result(result)


@router.put("")
async def upsert_user(
    user_data: UserUpsert,
    claims: dict = Depends(require_auth),
    users: UserStore = Depends(get_user_store)
):
    """
    Register a user on sign-in.

    Returns the stored user unchanged if the email is already known,
    otherwise the upsert acknowledgement.
    """
    result = await users.upsert_by_email(user_data.to_document())
    if isinstance(result, dict):
        return result

    log_event(
        action=AuditAction.USER_UPSERTED,
        actor=actor_from_claims(claims),
        metadata={"email": user_data.email}
    )

    return UpdateResponse.from_result(result).model_dump(by_alias=True)


async def _promote(oid: ObjectId, role: UserRole, claims: dict, users: UserStore) -> UpdateResponse:
    result = await users.set_role(oid, role)

    log_event(
        action=AuditAction.ROLE_CHANGED,
        actor=actor_from_claims(claims),
        metadata={"user_id": str(oid), "role": role.value, "matched": result.matched_count}
    )

    return UpdateResponse.from_result(result)


@router.patch("/deliveryMan/{id}", response_model=UpdateResponse)
async def make_delivery_man(
    oid: ObjectId = Depends(valid_object_id),
    claims: dict = Depends(require_auth),
    users: UserStore = Depends(get_user_store)
):
    """Promote a user to Delivery Man."""
    return await _promote(oid, UserRole.DELIVERY_MAN, claims, users)


@router.patch("/admin/{id}", response_model=UpdateResponse)
async def make_admin(
    oid: ObjectId = Depends(valid_object_id),
    claims: dict = Depends(require_auth),
    users: UserStore = Depends(get_user_store)
):
    """Promote a user to Admin."""
    return await _promote(oid, UserRole.ADMIN, claims, users)


@router.get("", response_model=List[Dict[str, Any]])
async def list_users(users: UserStore = Depends(get_user_store)):
    return await users.list_all()


@router.get("/u/delivery", response_model=List[Dict[str, Any]])
async def list_delivery_men(users: UserStore = Depends(get_user_store)):
    """All users with the Delivery Man role."""
    return await users.list_by_role(UserRole.DELIVERY_MAN)


@router.get("/{email}", response_model=Dict[str, Any])
async def get_user(
    email: str = Path(..., description="User email"),
    users: UserStore = Depends(get_user_store)
):
    """Get a user by email, 404 if unknown."""
    return await users.get_by_email(email)
