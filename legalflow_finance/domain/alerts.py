"""Risk alert evaluator - turns a forecast into human-readable alerts"""

from typing import List, Optional

from legalflow_finance.domain.models import ForecastMonth, RiskAlert, Severity

# Percentage change in projected revenue between the first and last month
TREND_THRESHOLD_PCT = 20.0

DEFICIT_RECOMMENDATIONS = (
    "Reduce non-essential operating expenses",
    "Intensify prospecting for new clients",
    "Review success-fee pricing",
)

DECLINE_RECOMMENDATIONS = (
    "Plan legal marketing actions immediately",
    "Review retainer contracts close to expiring",
)

GROWTH_RECOMMENDATIONS = (
    "Scale infrastructure to support the demand",
    "Consider reinvesting the surplus in technology",
)


def _deficit_alert(forecast: List[ForecastMonth]) -> Optional[RiskAlert]:
    negative = [m for m in forecast if m.projected_balance < 0]
    if not negative:
        return None

    return RiskAlert(
        severity=Severity.DANGER,
        title="Projected negative balance",
        message=(
            f"{len(negative)} month(s) with a projected deficit: "
            f"{', '.join(m.month_label for m in negative)}."
        ),
        recommendations=DEFICIT_RECOMMENDATIONS,
    )


def revenue_change_pct(forecast: List[ForecastMonth]) -> Optional[float]:
    """Change in projected revenue from first to last month, None when undefined"""
    if not forecast:
        return None
    first, last = forecast[0], forecast[-1]
    if first.projected_revenue == 0:
        return None
    return (last.projected_revenue - first.projected_revenue) / first.projected_revenue * 100


def _trend_alert(forecast: List[ForecastMonth]) -> Optional[RiskAlert]:
    change = revenue_change_pct(forecast)
    if change is None:
        return None

    if change < -TREND_THRESHOLD_PCT:
        return RiskAlert(
            severity=Severity.WARNING,
            title="Declining revenue trend",
            message=f"Projected revenue falls {abs(change):.1f}% over the forecast horizon.",
            recommendations=DECLINE_RECOMMENDATIONS,
        )
    elif change > TREND_THRESHOLD_PCT:
        return RiskAlert(
            severity=Severity.INFO,
            title="Revenue growth trend",
            message=f"Projected revenue grows {change:.1f}% over the forecast horizon.",
            recommendations=GROWTH_RECOMMENDATIONS,
        )
    return None


def evaluate_forecast_alerts(forecast: List[ForecastMonth]) -> List[RiskAlert]:
    """
    Evaluate alert rules against a forecast.

    Rules fire independently; output order is deficit alert first, then the
    trend alert (decline or growth, never both).
    """
    alerts = []
    for rule in (_deficit_alert, _trend_alert):
        alert = rule(forecast)
        if alert is not None:
            alerts.append(alert)
    return alerts
