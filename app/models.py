from dataclasses import dataclass, field
from typing import Dict


# Statuses tracked individually; any other provider status is reported as "other".
KNOWN_STATUSES = (
    "succeeded",
    "processing",
    "requires_payment_method",
    "requires_action",
    "canceled",
)
OTHER_STATUS = "other"
UNKNOWN_PAYMENT_METHOD = "unknown"


@dataclass(frozen=True)
class TransactionRecord:
    id: str
    amount: int  # minor currency units
    currency: str
    status: str
    payment_method: str = UNKNOWN_PAYMENT_METHOD
    created: int = 0  # unix seconds
    description: str = ""


@dataclass(frozen=True)
class BalanceSnapshot:
    available: int
    pending: int
    currency: str


@dataclass
class MethodTotals:
    count: int = 0
    amount: int = 0


@dataclass
class AnalyticsSummary:
    total: int = 0
    total_amount: int = 0
    by_payment_method: Dict[str, MethodTotals] = field(default_factory=dict)
    by_status: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class PaginationState:
    page: int
    limit: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


@dataclass(frozen=True)
class CurrencyOption:
    code: str
    name: str
    symbol: str
