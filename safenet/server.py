"""Standalone server runner."""

from __future__ import annotations

import uvicorn

from safenet.config import get_settings
from safenet.lib.logger import get_logger
from safenet.main import create_app

logger = get_logger(__name__)


def run() -> None:
    settings = get_settings()
    app = create_app(settings)
    logger.info("SafeNet API listening on %s", settings.port, extra={"host": settings.host, "port": settings.port})
    # Keep uvicorn from replacing the JSON handler on the root logger
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
