"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from credit_calculator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from credit_calculator.api.v1 import offers, calc
from credit_calculator.config import settings
from credit_calculator.domain.calculator import CreditCalculator
from credit_calculator.domain.models import RateConfiguration
from credit_calculator.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def create_app(rate_configuration: RateConfiguration | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    The rate configuration is read once here; every request shares the
    resulting calculator.
    """
    app = FastAPI(
        title="Credit Calculator",
        description="Loan offer quoting and credit pricing service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.calculator = CreditCalculator(rate_configuration or settings.rate_configuration())

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(offers.router, prefix="/calculator", tags=["offers"])
    app.include_router(calc.router, prefix="/calculator", tags=["credit"])

    return app


app = create_app()
