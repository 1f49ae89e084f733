"""Unit tests for date helpers"""

import pytest
from datetime import date, datetime
from legalflow_finance.domain.exceptions import ValidationError
from legalflow_finance.utils.date_utils import add_months, ensure_date, month_end, month_label, month_start


def test_add_months_clamps_to_month_length():
    """Test Jan 31 + 1 month lands on the last day of February"""
    assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
    assert add_months(date(2028, 1, 31), 1) == date(2028, 2, 29)
    assert add_months(date(2026, 3, 15), -6) == date(2025, 9, 15)


def test_month_bounds():
    """Test first and last day of a month"""
    assert month_start(date(2026, 3, 15)) == date(2026, 3, 1)
    assert month_end(date(2026, 2, 10)) == date(2026, 2, 28)
    assert month_end(date(2025, 12, 31)) == date(2025, 12, 31)


def test_month_label():
    """Test labels are locale independent"""
    assert month_label(date(2026, 4, 1)) == "April/2026"
    assert month_label(date(2025, 12, 1)) == "December/2025"


def test_ensure_date():
    """Test datetimes are reduced and strings rejected"""
    assert ensure_date(datetime(2026, 3, 15, 18, 30)) == date(2026, 3, 15)
    assert ensure_date(date(2026, 3, 15)) == date(2026, 3, 15)

    with pytest.raises(ValidationError):
        ensure_date("2026-03-15", "now")

    with pytest.raises(ValidationError):
        ensure_date(None, "now")
