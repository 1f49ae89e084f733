"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from legalflow_finance.domain.models import (
    ClientContract,
    ClientType,
    Confidence,
    EntryKind,
    EntryStatus,
    ForecastMonth,
    LedgerEntry,
    Severity,
)


class LedgerEntrySchema(BaseModel):
    """Single ledger record supplied by the caller"""

    kind: EntryKind
    category: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0, description="Non-negative amount, single currency")
    due_date: date
    paid_date: Optional[date] = None
    status: EntryStatus

    @model_validator(mode="after")
    def check_paid_date(self) -> "LedgerEntrySchema":
        if (self.status == EntryStatus.PAID) != (self.paid_date is not None):
            raise ValueError("paid_date must be set if and only if status is 'paid'")
        return self

    def to_domain(self) -> LedgerEntry:
        return LedgerEntry(
            kind=self.kind,
            category=self.category,
            amount=self.amount,
            due_date=self.due_date,
            status=self.status,
            paid_date=self.paid_date,
        )


class ClientContractSchema(BaseModel):
    """Recurring billing terms of a client"""

    client_type: ClientType
    is_active: bool = True
    retainer_fee: float = Field(0.0, ge=0)

    def to_domain(self) -> ClientContract:
        return ClientContract(
            client_type=self.client_type,
            is_active=self.is_active,
            retainer_fee=self.retainer_fee,
        )


class ForecastRequest(BaseModel):
    """Request body for POST /v1/forecast"""

    ledger: List[LedgerEntrySchema] = Field(default_factory=list)
    contracts: List[ClientContractSchema] = Field(default_factory=list)
    now: Optional[date] = Field(None, description="Evaluation date (default: today)")
    horizon_months: Optional[int] = Field(None, ge=0, le=60)


class ForecastMonthSchema(BaseModel):
    """Projection for one month"""

    model_config = ConfigDict(from_attributes=True)

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

    def to_domain(self) -> ForecastMonth:
        return ForecastMonth(**self.model_dump())


class ForecastSummarySchema(BaseModel):
    """Totals over the forecast horizon"""

    model_config = ConfigDict(from_attributes=True)

    months: int
    total_revenue: float
    total_expenses: float
    total_balance: float


class RiskAlertSchema(BaseModel):
    """Risk alert derived from a forecast"""

    model_config = ConfigDict(from_attributes=True)

    severity: Severity
    title: str
    message: str
    recommendations: List[str]


class ForecastResponse(BaseModel):
    """Response for POST /v1/forecast"""

    months: List[ForecastMonthSchema]
    summary: ForecastSummarySchema
    alerts: List[RiskAlertSchema]


class AlertsRequest(BaseModel):
    """Request body for POST /v1/forecast/alerts"""

    months: List[ForecastMonthSchema] = Field(default_factory=list)


class AlertsResponse(BaseModel):
    """Response for POST /v1/forecast/alerts"""

    alerts: List[RiskAlertSchema]


class HealthMetricsRequest(BaseModel):
    """Request body for POST /v1/health-metrics"""

    ledger: List[LedgerEntrySchema] = Field(default_factory=list)
    now: Optional[date] = Field(None, description="Evaluation date (default: today)")


class HealthMetricsResponse(BaseModel):
    """Response for POST /v1/health-metrics"""

    model_config = ConfigDict(from_attributes=True)

    receivable_30d: float
    receivable_30d_count: int
    default_rate: float
    default_rate_by_amount: float
    overdue_amount: float
    overdue_count: int
    paid_revenue_month: float
    paid_expense_month: float
    realized_profitability: float
    profit_margin: float
