import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_provider
from app.processors.base import BasePaymentProvider
from app.schemas.requests import CheckoutRequest
from app.schemas.responses import CheckoutResponse, ErrorResponse, PaymentStatusResponse
from app.services.checkout import create_checkout_intent
from app.services.payment_status import get_payment_status

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(e: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=str(e) or "Unknown error").model_dump(),
    )


@router.post("/checkout", response_model=CheckoutResponse, responses={500: {"model": ErrorResponse}})
async def checkout(request: CheckoutRequest, provider: BasePaymentProvider = Depends(get_provider)):
    """
    Create a payment intent with automatic payment methods enabled.

    The country (if any) is attached as intent metadata. Every call creates
    a new intent; there is no idempotency key.
    """
    try:
        client_secret = await create_checkout_intent(
            provider,
            amount=request.amount,
            currency=request.currency,
            country=request.country,
        )
    except Exception as e:
        logger.exception("Checkout error")
        return _error(e)

    return CheckoutResponse(client_secret=client_secret)


@router.get(
    "/payments/{payment_intent_id}/status",
    response_model=PaymentStatusResponse,
    responses={500: {"model": ErrorResponse}},
)
async def payment_status(payment_intent_id: str, provider: BasePaymentProvider = Depends(get_provider)):
    """Display state and message for an intent after the customer returns from checkout."""
    try:
        result = await get_payment_status(provider, payment_intent_id)
    except Exception as e:
        logger.exception("Payment status error for %s", payment_intent_id)
        return _error(e)

    return PaymentStatusResponse(**result)
