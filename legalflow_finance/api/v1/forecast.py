"""POST /v1/forecast - cash flow projection and risk alerts"""

import logging
import time
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request

from legalflow_finance.api.dependencies import get_forecast_policy, get_request_id, get_today
from legalflow_finance.api.v1.schemas import (
    AlertsRequest,
    AlertsResponse,
    ForecastMonthSchema,
    ForecastRequest,
    ForecastResponse,
    ForecastSummarySchema,
    RiskAlertSchema,
)
from legalflow_finance.config import settings
from legalflow_finance.domain.alerts import evaluate_forecast_alerts
from legalflow_finance.domain.exceptions import ValidationError
from legalflow_finance.domain.forecast import calculate_forecast, summarize_forecast
from legalflow_finance.domain.models import ForecastPolicy
from legalflow_finance.infrastructure.observability.logging import log_forecast
from legalflow_finance.infrastructure.observability.metrics import (
    record_alerts,
    record_forecast,
    validation_failure_counter,
)

router = APIRouter()


@router.post("/forecast", response_model=ForecastResponse)
def create_forecast(
    request_body: ForecastRequest,
    request: Request,
    policy: ForecastPolicy = Depends(get_forecast_policy),
    today: date = Depends(get_today),
):
    """
    Project cash flow for the coming months and evaluate risk alerts.

    Flow:
    1. Convert the ledger snapshot and contracts to domain objects
    2. Calculate the month-by-month forecast
    3. Evaluate alerts against the forecast
    4. Return months, horizon totals and alerts
    """
    start_time = time.time()
    request_id = get_request_id(request)
    horizon = (
        request_body.horizon_months
        if request_body.horizon_months is not None
        else settings.forecast_horizon_months
    )

    try:
        forecast = calculate_forecast(
            ledger=[e.to_domain() for e in request_body.ledger],
            contracts=[c.to_domain() for c in request_body.contracts],
            now=request_body.now or today,
            horizon_months=horizon,
            policy=policy,
        )
    except ValidationError as e:
        validation_failure_counter.labels(endpoint="forecast").inc()
        logging.warning(f"Invalid forecast input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected forecast error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    alerts = evaluate_forecast_alerts(forecast)
    deficit_months = sum(1 for m in forecast if m.projected_balance < 0)

    duration_ms = (time.time() - start_time) * 1000
    record_forecast(deficit_months, alerts)
    log_forecast(request_id, horizon, deficit_months, len(alerts), duration_ms)

    return ForecastResponse(
        months=[ForecastMonthSchema.model_validate(m) for m in forecast],
        summary=ForecastSummarySchema.model_validate(summarize_forecast(forecast)),
        alerts=[RiskAlertSchema.model_validate(a) for a in alerts],
    )


@router.post("/forecast/alerts", response_model=AlertsResponse)
def create_forecast_alerts(request_body: AlertsRequest):
    """
    Evaluate risk alerts for a forecast computed earlier.

    Returns:
        Deficit alert first (if any), then the revenue trend alert (if any)
    """
    alerts = evaluate_forecast_alerts([m.to_domain() for m in request_body.months])
    record_alerts(alerts)
    return AlertsResponse(alerts=[RiskAlertSchema.model_validate(a) for a in alerts])
