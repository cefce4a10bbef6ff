from fastapi import APIRouter, Depends

from app.config import Settings, get_settings
from app.dependencies import get_provider
from app.processors.base import BasePaymentProvider
from app.schemas.responses import CurrenciesResponse, CurrencyOut
from app.services.currencies import list_currencies

router = APIRouter()


@router.get("/currencies", response_model=CurrenciesResponse)
async def get_currencies(
    provider: BasePaymentProvider = Depends(get_provider),
    settings: Settings = Depends(get_settings),
):
    """
    Settlement currencies supported across all provider countries.

    Never fails: on upstream error the eight popular currencies are returned.
    """
    currencies = await list_currencies(provider, limit=settings.country_spec_limit)
    return CurrenciesResponse(
        currencies=[CurrencyOut(code=c.code, name=c.name, symbol=c.symbol) for c in currencies]
    )
