"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from pfhr_service.api.middleware import RequestIDMiddleware, MetricsMiddleware
from pfhr_service.api.v1 import score, submissions
from pfhr_service.infrastructure.observability.logging import setup_logging
from pfhr_service.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="PFHR Service",
        description="Personal Financial Health Rating scoring service",
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

    app.include_router(score.router, prefix="/v1", tags=["scores"])
    app.include_router(submissions.router, prefix="/v1", tags=["submissions"])

    return app


app = create_app()
