"""POST /v1/health-metrics - point-in-time financial health indicators"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request

from legalflow_finance.api.dependencies import get_request_id, get_today
from legalflow_finance.api.v1.schemas import HealthMetricsRequest, HealthMetricsResponse
from legalflow_finance.config import settings
from legalflow_finance.domain.exceptions import ValidationError
from legalflow_finance.domain.health import compute_health_metrics
from legalflow_finance.infrastructure.observability.metrics import (
    health_evaluation_counter,
    validation_failure_counter,
)

router = APIRouter()


@router.post("/health-metrics", response_model=HealthMetricsResponse)
def get_health_metrics(
    request_body: HealthMetricsRequest,
    request: Request,
    today: date = Depends(get_today),
):
    """Receivables due soon, default rate and this month's realized profitability"""
    try:
        metrics = compute_health_metrics(
            [e.to_domain() for e in request_body.ledger],
            now=request_body.now or today,
            receivable_window_days=settings.receivable_window_days,
        )
    except ValidationError as e:
        validation_failure_counter.labels(endpoint="health_metrics").inc()
        logging.warning(f"Invalid health metrics input: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected health metrics error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Internal server error")

    health_evaluation_counter.inc()
    return HealthMetricsResponse.model_validate(metrics)
