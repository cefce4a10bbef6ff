import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import stripe

from app.processors.base import BasePaymentProvider, ProviderError

logger = logging.getLogger(__name__)


class StripeProvider(BasePaymentProvider):
    """
    Stripe-backed provider.

    The SDK is blocking, so each call runs in a worker thread. Credentials are
    passed per request rather than through the global `stripe.api_key`.
    No retries: any SDK error surfaces as ProviderError.
    """

    def __init__(self, api_key: str, api_version: Optional[str] = None):
        self._options: Dict[str, Any] = {"api_key": api_key}
        if api_version:
            self._options["stripe_version"] = api_version

    @property
    def provider_name(self) -> str:
        return "stripe"

    async def _call(self, operation: str, func: Callable[..., Any], *args: Any, **params: Any) -> Any:
        try:
            return await asyncio.to_thread(func, *args, **self._options, **params)
        except stripe.StripeError as e:
            logger.error("Stripe %s failed: %s", operation, e)
            raise ProviderError(e.user_message or str(e)) from e

    async def retrieve_balance(self) -> Dict[str, Any]:
        balance = await self._call("balance.retrieve", stripe.Balance.retrieve)
        return balance.to_dict()

    async def list_payment_intents(self, created_gte: int, limit: int) -> List[Dict[str, Any]]:
        page = await self._call(
            "payment_intents.list",
            stripe.PaymentIntent.list,
            limit=limit,
            created={"gte": created_gte},
        )
        return [intent.to_dict() for intent in page.data]

    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        intent = await self._call(
            "payment_intents.create",
            stripe.PaymentIntent.create,
            amount=amount,
            currency=currency,
            automatic_payment_methods={"enabled": True},
            metadata=metadata or {},
        )
        return intent.to_dict()

    async def retrieve_payment_intent(self, payment_intent_id: str) -> Dict[str, Any]:
        intent = await self._call(
            "payment_intents.retrieve",
            stripe.PaymentIntent.retrieve,
            payment_intent_id,
        )
        return intent.to_dict()

    async def list_country_specs(self, limit: int) -> List[Dict[str, Any]]:
        page = await self._call("country_specs.list", stripe.CountrySpec.list, limit=limit)
        return [spec.to_dict() for spec in page.data]
