"""Date manipulation utilities"""

from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from legalflow_finance.domain.exceptions import ValidationError

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def ensure_date(value: object, name: str = "date") -> date:
    """Return value as a date, reducing datetimes; anything else is rejected"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise ValidationError(f"{name} must be a date, got {type(value).__name__}: {value!r}")


def add_months(from_date: date, months: int) -> date:
    """Shift by calendar months, clamping the day to the target month's length"""
    return from_date + relativedelta(months=months)


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    return month_start(day) + relativedelta(months=1) - timedelta(days=1)


def month_label(day: date) -> str:
    """Human-readable month label, e.g. 'March/2026' (locale independent)"""
    return f"{MONTH_NAMES[day.month - 1]}/{day.year}"
