"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from legalflow_finance.api.middleware import RequestIDMiddleware, MetricsMiddleware
from legalflow_finance.api.v1 import forecast, health_metrics
from legalflow_finance.infrastructure.observability.logging import setup_logging
from legalflow_finance.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="LegalFlow Finance",
        description="Cash flow forecasting, risk alerts and financial health metrics",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(forecast.router, prefix="/v1", tags=["forecast"])
    app.include_router(health_metrics.router, prefix="/v1", tags=["health-metrics"])

    return app


app = create_app()
