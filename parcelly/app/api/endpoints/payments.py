"""
Payment API Endpoints.
"""

from fastapi import APIRouter, Depends

from parcelly.app.schemas.billing import PaymentIntentCreate, PaymentIntentResponse
from parcelly.app.services.audit import AuditAction, log_event
from parcelly.app.services.payments import PaymentGateway, get_payment_gateway, to_minor_units

router = APIRouter(tags=["Payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    payment: PaymentIntentCreate,
    gateway: PaymentGateway = Depends(get_payment_gateway)
):
    """
    Create a card PaymentIntent for the parcel price.

    Prices below the minimum charge are rejected with 400.
    """
    client_secret = await gateway.create_intent(payment.price)

    log_event(
        action=AuditAction.PAYMENT_INTENT_CREATED,
        metadata={"amount": to_minor_units(payment.price), "currency": gateway.currency}
    )

    return PaymentIntentResponse(client_secret=client_secret)
