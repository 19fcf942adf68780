"""
Health check and metrics endpoints.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import Response

from account_service.infrastructure.monitoring.metrics import (
    get_metrics,
    get_metrics_content_type,
)

router = APIRouter(tags=["health"])
metrics_router = APIRouter(tags=["metrics"])


@router.get("/health")
async def health_check(request: Request) -> Dict[str, Any]:
    """Basic liveness check."""
    app_settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": app_settings.APP_NAME,
        "version": app_settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@metrics_router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
