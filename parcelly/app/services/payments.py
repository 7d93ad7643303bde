"""
Payment Intent Gateway.

Validates the charge and asks Stripe for a card PaymentIntent. No retries and
no idempotency key: a repeated request creates a second intent.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

import stripe
from starlette.concurrency import run_in_threadpool

from parcelly.app.core.config import settings
from parcelly.app.core.exceptions import PaymentAmountError, PaymentProviderError

logger = logging.getLogger(__name__)


def to_decimal(price: Union[float, int, str, Decimal]) -> Decimal:
    # str() first so 12.345 stays 12.345 rather than its binary expansion
    if isinstance(price, Decimal):
        return price
    return Decimal(str(price))


def to_minor_units(price: Union[float, int, str, Decimal]) -> int:
    """Convert a major-unit price to cents, rounding halves away from zero."""
    cents = to_decimal(price) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentGateway:
    """Thin wrapper around the Stripe PaymentIntent API."""

    def __init__(self, api_key: str, currency: str = "usd", minimum_charge: Decimal = Decimal("0.50")):
        self.api_key = api_key
        self.currency = currency
        self.minimum_charge = minimum_charge

    def request_intent(self, amount: int) -> str:
        """Blocking call to Stripe; returns the intent's client secret."""
        intent = stripe.PaymentIntent.create(
            api_key=self.api_key,
            amount=amount,
            currency=self.currency,
            payment_method_types=["card"],
        )
        return intent.client_secret

    async def create_intent(self, price: Union[float, Decimal]) -> str:
        """
        Create a PaymentIntent for `price` and return its client secret.

        Raises:
            PaymentAmountError: price is not finite or is below the minimum charge
            PaymentProviderError: Stripe rejected or failed the request
        """
        amount_major = to_decimal(price)
        # NaN and Infinity cannot be compared or quantized
        if not amount_major.is_finite() or amount_major < self.minimum_charge:
            raise PaymentAmountError(amount_major, self.minimum_charge)

        amount = to_minor_units(amount_major)
        try:
            client_secret = await run_in_threadpool(self.request_intent, amount)
        except stripe.StripeError as exc:
            logger.error("Stripe PaymentIntent creation failed for amount %s: %s", amount, exc)
            raise PaymentProviderError(str(exc)) from exc

        logger.info("Created PaymentIntent for %s %s", amount, self.currency)
        return client_secret


def get_payment_gateway() -> PaymentGateway:
    """FastAPI dependency; overridden in tests."""
    return PaymentGateway(
        api_key=settings.stripe_secret_key,
        currency=settings.payment_currency,
        minimum_charge=settings.minimum_charge,
    )
