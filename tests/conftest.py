"""
Shared pytest fixtures for all test modules.

The payment provider is replaced by an AsyncMock so no test touches the
network. Endpoint tests inject it through app.dependency_overrides.
"""
import pytest
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from app.dependencies import get_provider
from app.processors.base import BasePaymentProvider


DEFAULT_BALANCE = {
    "available": [{"amount": 125000, "currency": "eur"}],
    "pending": [{"amount": 4200, "currency": "eur"}],
}


def make_provider(
    intents: Optional[List[Dict[str, Any]]] = None,
    balance: Optional[Dict[str, Any]] = None,
    country_specs: Optional[List[Dict[str, Any]]] = None,
) -> AsyncMock:
    """AsyncMock shaped like BasePaymentProvider, returning canned raw payloads."""
    provider = AsyncMock(spec=BasePaymentProvider)
    provider.retrieve_balance = AsyncMock(return_value=balance if balance is not None else DEFAULT_BALANCE)
    provider.list_payment_intents = AsyncMock(return_value=intents or [])
    provider.list_country_specs = AsyncMock(return_value=country_specs or [])
    provider.create_payment_intent = AsyncMock()
    provider.retrieve_payment_intent = AsyncMock()
    return provider


@pytest.fixture
def provider():
    return make_provider()


@pytest.fixture
def client(provider):
    """
    TestClient against the real app with the provider dependency overridden.
    Not used as a context manager, so the lifespan (which builds the Stripe
    provider) never runs.
    """
    from app.main import app

    app.dependency_overrides[get_provider] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helper, not a fixture, so any test file can import and call it directly.
# ---------------------------------------------------------------------------
def make_intent(
    intent_id: str,
    amount: int = 1000,
    status: str = "succeeded",
    created: int = 1_700_000_000,
    currency: str = "eur",
    payment_method_types: Optional[List[str]] = None,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "id": intent_id,
        "object": "payment_intent",
        "amount": amount,
        "currency": currency,
        "status": status,
        "created": created,
        "payment_method_types": ["card"] if payment_method_types is None else payment_method_types,
        "description": description,
        "client_secret": f"{intent_id}_secret_test",
    }
