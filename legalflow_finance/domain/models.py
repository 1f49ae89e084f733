"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from legalflow_finance.domain.exceptions import ValidationError


class EntryKind(str, Enum):
    REVENUE = "revenue"
    EXPENSE = "expense"


class EntryStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class ClientType(str, Enum):
    PRIVATE = "private"
    PUBLIC_DEFENDER = "public-defender"


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class LedgerEntry:
    """Revenue or expense record supplied by the ledger collaborator"""

    kind: EntryKind
    category: str
    amount: float  # Non-negative, validated at ingestion
    due_date: date
    status: EntryStatus
    paid_date: Optional[date] = None  # Set iff status is paid


@dataclass(frozen=True)
class ClientContract:
    """Subset of client data relevant to recurring billing"""

    client_type: ClientType
    is_active: bool
    retainer_fee: float = 0.0


@dataclass(frozen=True)
class ForecastPolicy:
    """Tuning values for the forecast engine"""

    retainer_category: str = "Retainer Fee"
    fixed_expense_categories: Tuple[str, ...] = ("Operating Expenses", "Software & Technology", "Marketing")
    fixed_expense_fallback: float = 2500.0
    trailing_months: int = 6
    high_confidence_weight: float = 0.7
    medium_confidence_weight: float = 0.4

    def __post_init__(self) -> None:
        months = self.trailing_months
        if isinstance(months, bool) or not isinstance(months, int) or months < 1:
            raise ValidationError(f"trailing_months must be a positive integer, got {months!r}")
        if not 0 <= self.medium_confidence_weight <= self.high_confidence_weight:
            raise ValidationError(
                "Confidence weights must satisfy 0 <= medium <= high, got "
                f"medium={self.medium_confidence_weight}, high={self.high_confidence_weight}"
            )


@dataclass(frozen=True)
class ForecastMonth:
    """Projection for a single future month"""

    month_label: str
    month_start_date: date
    recurring_revenue: float
    variable_revenue: float
    projected_revenue: float
    fixed_expenses: float
    variable_expenses: float
    projected_expenses: float
    projected_balance: float
    confidence: Confidence


@dataclass(frozen=True)
class ForecastSummary:
    """Totals over a whole projection horizon"""

    months: int
    total_revenue: float
    total_expenses: float
    total_balance: float


@dataclass(frozen=True)
class RiskAlert:
    """Qualitative alert derived from a projection"""

    severity: Severity
    title: str
    message: str
    recommendations: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class HealthMetrics:
    """Point-in-time financial health indicators"""

    receivable_30d: float
    receivable_30d_count: int
    default_rate: float  # Count based, 0-100
    default_rate_by_amount: float  # Amount weighted counterpart, 0-100
    overdue_amount: float
    overdue_count: int
    paid_revenue_month: float
    paid_expense_month: float
    realized_profitability: float
    profit_margin: float
