"""Health check and metrics routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from safenet.config import Settings
from safenet.lib.logger import get_logger
from safenet.lib.metrics import MetricsRegistry
from safenet.system.schemas import HealthStatus

router = APIRouter()
logger = get_logger(__name__)


def get_metrics_registry(request: Request) -> MetricsRegistry:
    registry: MetricsRegistry | None = getattr(request.app.state, "metrics", None)
    if registry is None:
        raise RuntimeError("Metrics registry not configured on application state")
    return registry


def get_app_settings(request: Request) -> Settings:
    settings: Settings | None = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings not configured on application state")
    return settings


@router.get("/health", summary="Health check")
async def health_check(registry: MetricsRegistry = Depends(get_metrics_registry)) -> JSONResponse:
    """Count the probe and return liveness status with the current time."""

    registry.record_request()
    return JSONResponse(HealthStatus().model_dump())


@router.get("/metrics", summary="Prometheus metrics")
async def metrics_endpoint(
    registry: MetricsRegistry = Depends(get_metrics_registry),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    try:
        payload = await registry.export(timeout=settings.metrics_export_timeout_seconds)
    except TimeoutError as exc:
        logger.error(
            "metrics_export_timed_out",
            extra={"timeout_seconds": settings.metrics_export_timeout_seconds},
        )
        raise HTTPException(status_code=500, detail="Metrics export failed") from exc
    except Exception as exc:
        logger.exception("metrics_export_failed")
        raise HTTPException(status_code=500, detail="Metrics export failed") from exc
    return Response(content=payload, media_type=registry.content_type)
