"""Cash flow forecast engine - projects revenue, expenses and balance month by month"""

import logging
from datetime import date
from typing import List, Optional

from legalflow_finance.domain.exceptions import ValidationError
from legalflow_finance.domain.ledger import entries_in_window, matching, sum_by
from legalflow_finance.domain.models import (
    ClientContract,
    ClientType,
    Confidence,
    EntryKind,
    EntryStatus,
    ForecastMonth,
    ForecastPolicy,
    ForecastSummary,
    LedgerEntry,
)
from legalflow_finance.utils.date_utils import add_months, ensure_date, month_end, month_label, month_start

logger = logging.getLogger(__name__)

DEFAULT_POLICY = ForecastPolicy()


def recurring_revenue(contracts: List[ClientContract]) -> float:
    """Monthly retainer income from active private clients"""
    return sum(
        (c.retainer_fee for c in contracts if c.is_active and c.client_type == ClientType.PRIVATE),
        0.0,
    )


def determine_confidence(
    recurring: float,
    projected_revenue: float,
    policy: ForecastPolicy = DEFAULT_POLICY,
) -> Confidence:
    """
    Rate a month by the share of its revenue that is contractually recurring.

    Bands (default policy):
    - weight >= 0.7:       high
    - 0.4 <= weight < 0.7: medium
    - weight < 0.4:        low

    Zero projected revenue counts as weight 0.
    """
    weight = recurring / projected_revenue if projected_revenue > 0 else 0.0

    if weight >= policy.high_confidence_weight:
        return Confidence.HIGH
    elif weight >= policy.medium_confidence_weight:
        return Confidence.MEDIUM
    else:
        return Confidence.LOW


def calculate_forecast(
    ledger: List[LedgerEntry],
    contracts: List[ClientContract],
    now: date,
    horizon_months: int = 6,
    policy: Optional[ForecastPolicy] = None,
) -> List[ForecastMonth]:
    """
    Project the next horizon_months months, starting the month after now.

    Inputs per month are constant across the horizon:
    - Recurring revenue: retainers of active private contracts
    - Variable revenue: paid non-retainer revenue over the trailing window,
      divided by policy.trailing_months (empty months pull the average down)
    - Fixed expenses: last calendar month's paid fixed-category expenses,
      or policy.fixed_expense_fallback when that sum is zero
    - Variable expenses: paid non-fixed expenses over the trailing window,
      same fixed divisor

    Raises:
        ValidationError: now is not a date, or horizon_months is not a
            non-negative integer
    """
    now = ensure_date(now, "now")
    if isinstance(horizon_months, bool) or not isinstance(horizon_months, int) or horizon_months < 0:
        raise ValidationError(f"horizon_months must be a non-negative integer, got {horizon_months!r}")

    policy = policy or DEFAULT_POLICY

    # 1. Recurring revenue
    recurring = recurring_revenue(contracts)

    # 2-4. Historical averages over paid entries
    trailing = entries_in_window(ledger, add_months(now, -policy.trailing_months), now, "paid_date")
    last_month = add_months(now, -1)
    previous_month = entries_in_window(ledger, month_start(last_month), month_end(last_month), "paid_date")

    variable_revenue = sum_by(
        trailing,
        matching(
            kind=EntryKind.REVENUE,
            status=EntryStatus.PAID,
            exclude_categories=[policy.retainer_category],
        ),
    ) / policy.trailing_months

    fixed_expenses = sum_by(
        previous_month,
        matching(
            kind=EntryKind.EXPENSE,
            status=EntryStatus.PAID,
            categories=policy.fixed_expense_categories,
        ),
    )
    if fixed_expenses == 0:
        fixed_expenses = policy.fixed_expense_fallback

    variable_expenses = sum_by(
        trailing,
        matching(
            kind=EntryKind.EXPENSE,
            status=EntryStatus.PAID,
            exclude_categories=policy.fixed_expense_categories,
        ),
    ) / policy.trailing_months

    projected_revenue = recurring + variable_revenue
    projected_expenses = fixed_expenses + variable_expenses
    confidence = determine_confidence(recurring, projected_revenue, policy)

    logger.debug(
        "Forecast inputs | recurring=%s | variable_revenue=%s | fixed=%s | variable_expenses=%s",
        recurring,
        variable_revenue,
        fixed_expenses,
        variable_expenses,
    )

    # 5. One projection per future month
    forecast = []
    for offset in range(1, horizon_months + 1):
        target = month_start(add_months(now, offset))
        forecast.append(
            ForecastMonth(
                month_label=month_label(target),
                month_start_date=target,
                recurring_revenue=recurring,
                variable_revenue=variable_revenue,
                projected_revenue=projected_revenue,
                fixed_expenses=fixed_expenses,
                variable_expenses=variable_expenses,
                projected_expenses=projected_expenses,
                projected_balance=projected_revenue - projected_expenses,
                confidence=confidence,
            )
        )

    return forecast


def summarize_forecast(forecast: List[ForecastMonth]) -> ForecastSummary:
    """Horizon totals for summary cards"""
    return ForecastSummary(
        months=len(forecast),
        total_revenue=sum((m.projected_revenue for m in forecast), 0.0),
        total_expenses=sum((m.projected_expenses for m in forecast), 0.0),
        total_balance=sum((m.projected_balance for m in forecast), 0.0),
    )
