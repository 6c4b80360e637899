"""Pytest fixtures for SafeNet API tests."""

from collections.abc import AsyncIterator
import os

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("SAFENET_ENV", "test")

from safenet.config import Settings
from safenet.lib.metrics import MetricsRegistry
from safenet.main import create_app


@pytest.fixture()
def settings() -> Settings:
    """Return test-mode settings independent of the process environment."""
    return Settings(SAFENET_ENV="test", METRICS_EXPORT_TIMEOUT_SECONDS=5)


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    """Return a fresh application with its own metrics registry."""
    return create_app(settings)


@pytest.fixture()
def metrics(app: FastAPI) -> MetricsRegistry:
    return app.state.metrics


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an `httpx.AsyncClient` configured for the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
