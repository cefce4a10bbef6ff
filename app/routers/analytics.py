import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.dependencies import get_provider
from app.processors.base import BasePaymentProvider
from app.schemas.responses import (
    AnalyticsOut,
    AnalyticsResponse,
    BalanceOut,
    ErrorResponse,
    MethodTotalsOut,
    PaginationOut,
    PaymentHistoryItem,
)
from app.services.analytics import DashboardResult, HistoryQuery, build_dashboard

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(result: DashboardResult) -> AnalyticsResponse:
    summary = result.summary
    pagination = result.pagination
    return AnalyticsResponse(
        analytics=AnalyticsOut(
            total=summary.total,
            total_amount=summary.total_amount,
            by_payment_method={
                method: MethodTotalsOut(count=totals.count, amount=totals.amount)
                for method, totals in summary.by_payment_method.items()
            },
            by_status=dict(summary.by_status),
        ),
        payment_history=[
            PaymentHistoryItem(
                id=r.id,
                amount=r.amount,
                currency=r.currency,
                status=r.status,
                payment_method=r.payment_method,
                created=r.created,
                description=r.description,
            )
            for r in result.history
        ],
        pagination=PaginationOut(
            page=pagination.page,
            limit=pagination.limit,
            total_items=pagination.total_items,
            total_pages=pagination.total_pages,
            has_next_page=pagination.has_next_page,
            has_previous_page=pagination.has_previous_page,
        ),
        balance=BalanceOut(
            available=result.balance.available,
            pending=result.balance.pending,
            currency=result.balance.currency,
        ),
        currency=result.currency,
    )


@router.get("/analytics", response_model=AnalyticsResponse, responses={500: {"model": ErrorResponse}})
async def get_analytics(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    sort_by: Optional[Literal["created", "amount", "status"]] = Query(None, alias="sortBy"),
    sort_order: Optional[Literal["asc", "desc"]] = Query(None, alias="sortOrder"),
    search_field: Optional[str] = Query(None, alias="searchField"),
    search_value: Optional[str] = Query(None, alias="searchValue"),
    status: Optional[str] = Query(None),
    provider: BasePaymentProvider = Depends(get_provider),
    settings: Settings = Depends(get_settings),
):
    """
    Dashboard analytics plus one page of payment history.

    - Summary covers every intent in the trailing window, unfiltered
    - searchField/searchValue: case-insensitive substring search
    - sortBy/sortOrder: applied only when both are given
    - Upstream failure returns 500 {success: false, error}
    """
    query = HistoryQuery(
        page=page,
        limit=limit or settings.default_page_size,
        sort_by=sort_by,
        sort_order=sort_order,
        search_field=search_field,
        search_value=search_value,
        status=status,
    )

    try:
        result = await build_dashboard(provider, settings, query)
    except Exception as e:
        logger.exception("Analytics error")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=str(e) or "Unknown error").model_dump(),
        )

    return _to_response(result)
