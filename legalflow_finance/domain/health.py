"""Financial health metrics computed directly from the ledger"""

from datetime import date, timedelta
from typing import List

from legalflow_finance.domain.ledger import count_by, entries_in_window, matching, sum_by
from legalflow_finance.domain.models import EntryKind, EntryStatus, HealthMetrics, LedgerEntry
from legalflow_finance.utils.date_utils import ensure_date, month_end, month_start


def _percentage(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def compute_health_metrics(
    ledger: List[LedgerEntry],
    now: date,
    receivable_window_days: int = 30,
) -> HealthMetrics:
    """
    Aggregate point-in-time health indicators.

    Metrics:
    - Receivables: pending revenue due strictly after now and strictly
      before now + receivable_window_days
    - Default rate: overdue / (overdue + pending) revenue entries, by count.
      default_rate_by_amount gives the same ratio weighted by amount.
    - Realized profitability: paid revenue minus paid expenses whose
      paid_date falls in the calendar month of now

    Raises:
        ValidationError: now is not a date
    """
    now = ensure_date(now, "now")

    pending_revenue = matching(kind=EntryKind.REVENUE, status=EntryStatus.PENDING)
    overdue_revenue = matching(kind=EntryKind.REVENUE, status=EntryStatus.OVERDUE)

    # Receivables: day granularity makes (now, now + N) equal to [now + 1, now + N - 1]
    receivables: List[LedgerEntry] = []
    if receivable_window_days > 1:
        receivables = entries_in_window(
            ledger,
            now + timedelta(days=1),
            now + timedelta(days=receivable_window_days - 1),
            "due_date",
        )

    # Default rate
    overdue_count = count_by(ledger, overdue_revenue)
    pending_count = count_by(ledger, pending_revenue)
    overdue_amount = sum_by(ledger, overdue_revenue)
    pending_amount = sum_by(ledger, pending_revenue)

    # Realized profitability for the current month
    this_month = entries_in_window(ledger, month_start(now), month_end(now), "paid_date")
    paid_revenue = sum_by(this_month, matching(kind=EntryKind.REVENUE, status=EntryStatus.PAID))
    paid_expense = sum_by(this_month, matching(kind=EntryKind.EXPENSE, status=EntryStatus.PAID))
    profitability = paid_revenue - paid_expense

    return HealthMetrics(
        receivable_30d=sum_by(receivables, pending_revenue),
        receivable_30d_count=count_by(receivables, pending_revenue),
        default_rate=_percentage(overdue_count, overdue_count + pending_count),
        default_rate_by_amount=_percentage(overdue_amount, overdue_amount + pending_amount),
        overdue_amount=overdue_amount,
        overdue_count=overdue_count,
        paid_revenue_month=paid_revenue,
        paid_expense_month=paid_expense,
        realized_profitability=profitability,
        profit_margin=_percentage(profitability, paid_revenue),
    )
