"""
Currency catalog service.

Builds the checkout currency picker from the provider's country specs:
every settlement currency any country supports, deduplicated, labelled
from a static table and ordered with the popular currencies first.

This is the only service with a degraded mode: if the provider call fails
the fixed fallback list is returned instead of an error.
"""
import logging
from typing import List

from app.models import CurrencyOption
from app.processors.base import BasePaymentProvider

logger = logging.getLogger(__name__)


CURRENCY_INFO = {
    "usd": ("US Dollar", "$"),
    "eur": ("Euro", "€"),
    "gbp": ("British Pound", "£"),
    "jpy": ("Japanese Yen", "¥"),
    "cad": ("Canadian Dollar", "C$"),
    "aud": ("Australian Dollar", "A$"),
    "chf": ("Swiss Franc", "CHF"),
    "cny": ("Chinese Yuan", "¥"),
    "inr": ("Indian Rupee", "₹"),
    "sgd": ("Singapore Dollar", "S$"),
    "hkd": ("Hong Kong Dollar", "HK$"),
    "nzd": ("New Zealand Dollar", "NZ$"),
    "sek": ("Swedish Krona", "kr"),
    "nok": ("Norwegian Krone", "kr"),
    "dkk": ("Danish Krone", "kr"),
    "pln": ("Polish Złoty", "zł"),
    "mxn": ("Mexican Peso", "MX$"),
    "brl": ("Brazilian Real", "R$"),
    "krw": ("South Korean Won", "₩"),
    "zar": ("South African Rand", "R"),
}

POPULAR_CURRENCIES = ["usd", "eur", "gbp", "jpy", "cad", "aud", "chf", "cny"]


def currency_option(code: str) -> CurrencyOption:
    name, symbol = CURRENCY_INFO.get(code, (code.upper(), code.upper()))
    return CurrencyOption(code=code, name=name, symbol=symbol)


FALLBACK_CURRENCIES = [currency_option(code) for code in POPULAR_CURRENCIES]


def _sort_key(code: str):
    # Popular prefix in its fixed order, everything else alphabetical after it
    if code in POPULAR_CURRENCIES:
        return (0, POPULAR_CURRENCIES.index(code), "")
    return (1, 0, code)


def collect_currency_codes(country_specs) -> List[str]:
    codes = set()
    for spec in country_specs:
        codes.update(spec.get("supported_payment_currencies") or [])
    return sorted(codes, key=_sort_key)


async def list_currencies(provider: BasePaymentProvider, limit: int = 100) -> List[CurrencyOption]:
    try:
        country_specs = await provider.list_country_specs(limit=limit)
        codes = collect_currency_codes(country_specs)
    except Exception as e:
        logger.warning("Currency catalog unavailable, serving fallback list: %s", e)
        return list(FALLBACK_CURRENCIES)

    return [currency_option(code) for code in codes]
