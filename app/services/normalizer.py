"""
Normalizes raw provider payloads into domain records.

The provider speaks in its own JSON shapes (payment intents, balance
entries). This module maps them to TransactionRecord and BalanceSnapshot
so the services never touch provider field names directly.
"""
from typing import Dict, Any, List, Optional

from app.models import (
    BalanceSnapshot,
    KNOWN_STATUSES,
    OTHER_STATUS,
    TransactionRecord,
    UNKNOWN_PAYMENT_METHOD,
)


def normalize_status(raw_status: Optional[str]) -> str:
    if raw_status in KNOWN_STATUSES:
        return raw_status
    return OTHER_STATUS


def normalize_intent(raw: Dict[str, Any]) -> TransactionRecord:
    """
    Maps one raw payment intent to a TransactionRecord.

    The payment method is the first advertised payment-method type;
    a missing or empty list falls back to "unknown".
    """
    method_types = raw.get("payment_method_types") or []
    return TransactionRecord(
        id=raw["id"],
        amount=int(raw.get("amount") or 0),
        currency=(raw.get("currency") or "").lower(),
        status=normalize_status(raw.get("status")),
        payment_method=method_types[0] if method_types else UNKNOWN_PAYMENT_METHOD,
        created=int(raw.get("created") or 0),
        description=raw.get("description") or "",
    )


def normalize_intents(raw_intents: List[Dict[str, Any]]) -> List[TransactionRecord]:
    return [normalize_intent(raw) for raw in raw_intents]


def _pick_entry(entries: List[Dict[str, Any]], currency: str) -> Optional[Dict[str, Any]]:
    """Entry in the preferred currency, else the first one, else None."""
    for entry in entries:
        if entry.get("currency") == currency:
            return entry
    return entries[0] if entries else None


def normalize_balance(raw: Dict[str, Any], primary_currency: str) -> BalanceSnapshot:
    """
    Picks a single-currency view of the provider balance.

    Available and pending are chosen independently: each prefers the
    primary currency and otherwise takes its first entry.
    """
    available = _pick_entry(raw.get("available") or [], primary_currency)
    pending = _pick_entry(raw.get("pending") or [], primary_currency)

    return BalanceSnapshot(
        available=int(available.get("amount") or 0) if available else 0,
        pending=int(pending.get("amount") or 0) if pending else 0,
        currency=(available.get("currency") if available else None) or primary_currency,
    )
