from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)


class MethodTotalsOut(BaseModel):
    count: int
    amount: int


class AnalyticsOut(CamelModel):
    total: int
    total_amount: int = Field(alias="totalAmount")
    by_payment_method: Dict[str, MethodTotalsOut] = Field(alias="byPaymentMethod")
    by_status: Dict[str, int] = Field(alias="byStatus")


class PaymentHistoryItem(CamelModel):
    id: str
    amount: int
    currency: str
    status: str
    payment_method: str = Field(alias="paymentMethod")
    created: int
    description: str


class PaginationOut(CamelModel):
    page: int
    limit: int
    total_items: int = Field(alias="totalItems")
    total_pages: int = Field(alias="totalPages")
    has_next_page: bool = Field(alias="hasNextPage")
    has_previous_page: bool = Field(alias="hasPreviousPage")


class BalanceOut(BaseModel):
    available: int
    pending: int
    currency: str


class AnalyticsResponse(CamelModel):
    success: bool = True
    analytics: AnalyticsOut
    payment_history: List[PaymentHistoryItem] = Field(alias="paymentHistory")
    pagination: PaginationOut
    balance: BalanceOut
    currency: str


class CheckoutResponse(CamelModel):
    client_secret: str = Field(alias="clientSecret")


class CurrencyOut(BaseModel):
    code: str
    name: str
    symbol: str


class CurrenciesResponse(BaseModel):
    currencies: List[CurrencyOut]


class PaymentStatusResponse(CamelModel):
    payment_intent_id: str = Field(alias="paymentIntentId")
    status: str
    state: str  # "success" | "loading" | "error"
    message: str
    amount: Optional[int] = None
    currency: Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
