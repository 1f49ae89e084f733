"""Dependency injection for FastAPI endpoints"""

from datetime import date

from fastapi import Request

from legalflow_finance.config import settings
from legalflow_finance.domain.models import ForecastPolicy


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Evaluation date used when a request omits 'now'"""
    return date.today()


def get_forecast_policy() -> ForecastPolicy:
    """Build forecast tuning values from settings"""
    return ForecastPolicy(
        retainer_category=settings.retainer_category,
        fixed_expense_categories=tuple(settings.fixed_expense_categories),
        fixed_expense_fallback=settings.fixed_expense_fallback,
        trailing_months=settings.forecast_trailing_months,
    )
