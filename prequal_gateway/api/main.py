"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from prequal_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from prequal_gateway.api.v1 import prequalification, schedule
from prequal_gateway.infrastructure.observability.logging import setup_logging
from prequal_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Pre-Qualification Gateway",
        description="Server-side eligibility check and loan offer pricing",
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

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(prequalification.router, prefix="/v1", tags=["prequalification"])
    app.include_router(schedule.router, prefix="/v1", tags=["offers"])

    return app


app = create_app()
