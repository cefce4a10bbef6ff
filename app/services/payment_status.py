"""
Payment status lookup for the post-checkout confirmation page.

Maps an intent's provider status to a display state and message:
  succeeded               -> success
  processing              -> loading (still settling)
  requires_payment_method -> error (payment failed, try another method)
  anything else           -> error (contact support)
"""
from typing import Dict, Any

from app.processors.base import BasePaymentProvider


STATUS_DISPLAY = {
    "succeeded": ("success", "Payment successful! Thank you for your purchase."),
    "processing": ("loading", "Your payment is processing. This may take a few moments."),
    "requires_payment_method": ("error", "Payment failed. Please try another payment method."),
}

DEFAULT_DISPLAY = ("error", "Something went wrong. Please contact support.")


def describe_status(status: str):
    """Returns (state, message) for a provider status."""
    return STATUS_DISPLAY.get(status, DEFAULT_DISPLAY)


async def get_payment_status(provider: BasePaymentProvider, payment_intent_id: str) -> Dict[str, Any]:
    intent = await provider.retrieve_payment_intent(payment_intent_id)
    status = intent.get("status") or ""
    state, message = describe_status(status)

    return {
        "payment_intent_id": intent.get("id", payment_intent_id),
        "status": status,
        "state": state,
        "message": message,
        "amount": intent.get("amount"),
        "currency": intent.get("currency"),
    }
