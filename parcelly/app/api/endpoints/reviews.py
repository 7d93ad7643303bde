"""
Review API Endpoints.

Customers review the delivery man who brought their parcel.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path

from parcelly.app.core.dependencies import require_auth
from parcelly.app.core.exceptions import InsufficientPermissionsError
from parcelly.app.models.enums import UserRole
from parcelly.app.schemas.common import InsertResponse
from parcelly.app.schemas.review import ReviewCreate
from parcelly.app.services.audit import AuditAction, actor_from_claims, log_event
from parcelly.app.services.review_store import ReviewStore, get_review_store
from parcelly.app.services.user_store import UserStore, get_user_store

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_reviews(reviews: ReviewStore = Depends(get_review_store)):
    return await reviews.list_all()


@router.post("", response_model=InsertResponse)
async def create_review(
    review_data: ReviewCreate,
    claims: dict = Depends(require_auth),
    reviews: ReviewStore = Depends(get_review_store)
):
    result = await reviews.create(review_data.to_document())

    log_event(
        action=AuditAction.REVIEW_CREATED,
        actor=actor_from_claims(claims),
        metadata={"review_id": str(result.inserted_id), "delivery_man_id": review_data.delivery_man_id}
    )

    return InsertResponse.from_result(result)


@router.get("/deliveryManId/{email}", response_model=List[Dict[str, Any]])
async def list_delivery_man_reviews(
    email: str = Path(..., description="Delivery man's email"),
    users: UserStore = Depends(get_user_store),
    reviews: ReviewStore = Depends(get_review_store)
):
    """
    Reviews left for a delivery man.

    403 unless the email belongs to a user with the Delivery Man role.
    """
    user = await users.find_by_email(email)
    if user is None or user.get("role") != UserRole.DELIVERY_MAN.value:
        raise InsufficientPermissionsError(
            "Forbidden access",
            details={"email": email}
        )

    return await reviews.list_for_delivery_man(str(user["_id"]))
