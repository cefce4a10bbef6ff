"""
Search, sort and pagination over the payment-history list.

Search fields form a closed set: each name maps to an accessor returning
the field as a string. A field outside the set matches nothing.
"""
import math
from typing import Callable, Dict, List, Optional

from app.models import PaginationState, TransactionRecord


SEARCH_FIELDS: Dict[str, Callable[[TransactionRecord], str]] = {
    "id": lambda r: r.id,
    "amount": lambda r: str(r.amount),
    "currency": lambda r: r.currency,
    "status": lambda r: r.status,
    "paymentMethod": lambda r: r.payment_method,
    "created": lambda r: str(r.created),
    "description": lambda r: r.description,
}

SORT_KEYS = {
    "created": lambda r: r.created,
    "amount": lambda r: r.amount,
    "status": lambda r: r.status,
}


def search_records(
    records: List[TransactionRecord],
    search_field: Optional[str],
    search_value: Optional[str],
) -> List[TransactionRecord]:
    if not search_field or not search_value:
        return list(records)

    accessor = SEARCH_FIELDS.get(search_field)
    if accessor is None:
        return []

    needle = search_value.lower()
    return [r for r in records if needle in accessor(r).lower()]


def filter_by_status(records: List[TransactionRecord], status: Optional[str]) -> List[TransactionRecord]:
    if not status:
        return list(records)
    return [r for r in records if r.status == status]


def sort_records(
    records: List[TransactionRecord],
    sort_by: Optional[str],
    sort_order: Optional[str],
) -> List[TransactionRecord]:
    """Stable sort; equal keys keep fetch order in both directions."""
    if not sort_by or not sort_order:
        return list(records)
    return sorted(records, key=SORT_KEYS[sort_by], reverse=(sort_order == "desc"))


def paginate(records: List[TransactionRecord], page: int, limit: int):
    """Returns (page_slice, PaginationState). Pages past the end are empty."""
    total_items = len(records)
    total_pages = math.ceil(total_items / limit)
    start = (page - 1) * limit

    state = PaginationState(
        page=page,
        limit=limit,
        total_items=total_items,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )
    return records[start:start + limit], state
