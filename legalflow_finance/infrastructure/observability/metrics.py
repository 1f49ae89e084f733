"""Prometheus metrics for forecast volume, alert mix and request latency"""

from typing import List

from prometheus_client import Counter, Histogram

from legalflow_finance.domain.models import RiskAlert

# Forecast metrics
forecast_counter = Counter(
    "legalflow_forecast_total",
    "Total forecasts computed",
)

forecast_deficit_counter = Counter(
    "legalflow_forecast_deficit_total",
    "Forecasts with at least one month in deficit",
)

alert_counter = Counter(
    "legalflow_forecast_alerts_total",
    "Risk alerts emitted",
    ["severity"],  # info | warning | danger
)

# Health metrics
health_evaluation_counter = Counter(
    "legalflow_health_evaluations_total",
    "Health metric evaluations",
)

validation_failure_counter = Counter(
    "legalflow_validation_failures_total",
    "Domain calls rejected with a validation error",
    ["endpoint"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_forecast(deficit_months: int, alerts: List[RiskAlert]) -> None:
    """Record forecast metrics for monitoring deficit frequency and alert mix"""
    forecast_counter.inc()
    if deficit_months > 0:
        forecast_deficit_counter.inc()
    record_alerts(alerts)


def record_alerts(alerts: List[RiskAlert]) -> None:
    for alert in alerts:
        alert_counter.labels(severity=alert.severity.value).inc()
