import logging
from typing import Optional

from app.processors.base import BasePaymentProvider

logger = logging.getLogger(__name__)


async def create_checkout_intent(
    provider: BasePaymentProvider,
    amount: int,
    currency: str,
    country: Optional[str] = None,
) -> str:
    """
    Create one payment intent and return its client secret.

    No idempotency key is sent: two identical requests create two intents.
    Amount and currency are forwarded as-is; the provider validates them.
    """
    metadata = {"country": country} if country else {}
    intent = await provider.create_payment_intent(amount=amount, currency=currency, metadata=metadata)

    logger.info("Created payment intent %s (%s %s)", intent.get("id"), amount, currency)
    return intent["client_secret"]
