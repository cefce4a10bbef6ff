"""
Dashboard analytics service.

Orchestrates:
1. Fetch balance + recent payment intents (concurrently)
2. Normalize to domain records
3. Summarize the full window (totals, per-method, per-status)
4. Search / status-filter / sort / paginate the display list

The summary is always computed over the whole fetched window; the query
parameters only shape the list returned for display.
"""
import asyncio
import logging
import time
from typing import List, Optional

from app.config import Settings
from app.models import (
    AnalyticsSummary,
    BalanceSnapshot,
    MethodTotals,
    PaginationState,
    TransactionRecord,
)
from app.processors.base import BasePaymentProvider
from app.services.history import filter_by_status, paginate, search_records, sort_records
from app.services.normalizer import normalize_balance, normalize_intents

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class HistoryQuery:
    def __init__(
        self,
        page: int = 1,
        limit: int = 6,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        search_field: Optional[str] = None,
        search_value: Optional[str] = None,
        status: Optional[str] = None,
    ):
        self.page = page
        self.limit = limit
        self.sort_by = sort_by
        self.sort_order = sort_order
        self.search_field = search_field
        self.search_value = search_value
        self.status = status


class DashboardResult:
    def __init__(
        self,
        summary: AnalyticsSummary,
        history: List[TransactionRecord],
        pagination: PaginationState,
        balance: BalanceSnapshot,
    ):
        self.summary = summary
        self.history = history
        self.pagination = pagination
        self.balance = balance

    @property
    def currency(self) -> str:
        return self.balance.currency


def summarize(records: List[TransactionRecord]) -> AnalyticsSummary:
    summary = AnalyticsSummary()

    for record in records:
        summary.total += 1

        # Revenue and per-method totals only count settled money
        if record.status == "succeeded":
            summary.total_amount += record.amount
            method = summary.by_payment_method.setdefault(record.payment_method, MethodTotals())
            method.count += 1
            method.amount += record.amount

        summary.by_status[record.status] = summary.by_status.get(record.status, 0) + 1

    return summary


def shape_history(records: List[TransactionRecord], query: HistoryQuery):
    """Applies search, status filter, sort and pagination in that order."""
    shaped = search_records(records, query.search_field, query.search_value)
    shaped = filter_by_status(shaped, query.status)
    shaped = sort_records(shaped, query.sort_by, query.sort_order)
    return paginate(shaped, query.page, query.limit)


async def build_dashboard(
    provider: BasePaymentProvider,
    settings: Settings,
    query: HistoryQuery,
    now: Optional[float] = None,
) -> DashboardResult:
    """
    Build the analytics payload for one request.

    Raises:
        ProviderError: if either upstream fetch fails (no partial results)
    """
    now = time.time() if now is None else now
    created_gte = int(now) - settings.analytics_window_days * SECONDS_PER_DAY

    raw_balance, raw_intents = await asyncio.gather(
        provider.retrieve_balance(),
        provider.list_payment_intents(created_gte=created_gte, limit=settings.analytics_fetch_limit),
    )

    records = normalize_intents(raw_intents)
    balance = normalize_balance(raw_balance, settings.primary_currency)
    summary = summarize(records)
    page_slice, pagination = shape_history(records, query)

    logger.debug(
        "Analytics window: %d intents, %d after filtering, page %d/%d",
        summary.total, pagination.total_items, pagination.page, pagination.total_pages,
    )

    return DashboardResult(
        summary=summary,
        history=page_slice,
        pagination=pagination,
        balance=balance,
    )
