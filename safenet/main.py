"""FastAPI application entrypoint for the SafeNet API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from safenet import __version__
from safenet.api import router as api_router
from safenet.config import Settings, get_settings
from safenet.lib.logger import configure_logging, get_logger
from safenet.lib.metrics import MetricsRegistry
from safenet.system import router as system_router

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, metrics: MetricsRegistry | None = None) -> FastAPI:
    """Build the application with its own metrics registry.

    Default runtime metrics are skipped in test mode. The registry starts on
    application startup and stops on shutdown.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level)
    if metrics is None:
        metrics = MetricsRegistry(
            collect_default_metrics=not settings.test_mode,
            lag_interval_seconds=settings.event_loop_lag_interval_seconds,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        registry: MetricsRegistry = app.state.metrics
        registry.start()
        try:
            yield
        finally:
            await registry.stop()

    app = FastAPI(title="SafeNet API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.metrics = metrics

    app.include_router(system_router, tags=["system"])
    app.include_router(api_router, prefix="/api", tags=["api"])

    logger.debug("app_created", extra={"safenet_env": settings.safenet_env})
    return app
