from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional


class ProviderError(RuntimeError):
    """Raised when the upstream payment provider rejects or fails a call."""


class BasePaymentProvider(ABC):
    """
    Abstract base for the upstream payment provider.

    Every method returns the provider's raw JSON shape as plain dicts;
    app.services.normalizer turns those into domain records.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @abstractmethod
    async def retrieve_balance(self) -> Dict[str, Any]:
        """Return {"available": [{amount, currency}], "pending": [...]}."""
        pass

    @abstractmethod
    async def list_payment_intents(self, created_gte: int, limit: int) -> List[Dict[str, Any]]:
        """Return at most `limit` intents created at or after `created_gte` (unix seconds)."""
        pass

    @abstractmethod
    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        pass

    @abstractmethod
    async def retrieve_payment_intent(self, payment_intent_id: str) -> Dict[str, Any]:
        pass

    @abstractmethod
    async def list_country_specs(self, limit: int) -> List[Dict[str, Any]]:
        pass
