"""FastAPI application factory for a standalone webhook receiver"""

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from temboplus.api.webhooks import WebhookHandler, build_webhook_router
from temboplus.config import settings
from temboplus.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def create_app(handler: WebhookHandler, webhook_path: str = "/webhooks/temboplus") -> FastAPI:
    """Create a receiver app; hosting it (uvicorn, gunicorn) is up to the caller"""
    app = FastAPI(
        title="TemboPlus Webhook Receiver",
        description="Receives payment status callbacks from TemboPlus",
        version="0.1.0",
    )

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(build_webhook_router(handler, path=webhook_path), tags=["webhooks"])

    return app
