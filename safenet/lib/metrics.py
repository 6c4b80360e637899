"""Prometheus metrics registry for the SafeNet service."""

from __future__ import annotations

import asyncio
import contextlib
from typing import Literal

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Gauge,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

from safenet.lib.logger import get_logger

REQUESTS_METRIC = "safenet_requests"
EVENT_LOOP_LAG_METRIC = "safenet_event_loop_lag_seconds"

RegistryState = Literal["uninitialized", "collecting", "stopped"]

logger = get_logger(__name__)


class MetricsRegistry:
    """Own one Prometheus collector registry and its background refresh task.

    The request counter is registered on construction. Default runtime
    metrics (process, platform, GC and event-loop lag) are only registered by
    :meth:`start`, and only when ``collect_default_metrics`` is true, so test
    runs never leave a sampler task behind.
    """

    def __init__(
        self,
        *,
        collect_default_metrics: bool = True,
        lag_interval_seconds: float = 5.0,
    ) -> None:
        if lag_interval_seconds <= 0:
            raise ValueError("lag_interval_seconds must be positive")
        self._registry = CollectorRegistry()
        self._collect_default_metrics = collect_default_metrics
        self._lag_interval_seconds = lag_interval_seconds
        self._state: RegistryState = "uninitialized"
        self._lag_task: asyncio.Task[None] | None = None
        self._event_loop_lag: Gauge | None = None
        self._requests = Counter(
            REQUESTS_METRIC,
            "Total HTTP requests",
            registry=self._registry,
        )

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def collects_default_metrics(self) -> bool:
        return self._collect_default_metrics

    @property
    def content_type(self) -> str:
        """Content type of the payload produced by :meth:`export`."""

        return CONTENT_TYPE_LATEST

    @property
    def collector_registry(self) -> CollectorRegistry:
        return self._registry

    def record_request(self) -> None:
        self._requests.inc()

    def requests_total(self) -> int:
        value = self._registry.get_sample_value(f"{REQUESTS_METRIC}_total")
        return int(value or 0)

    def start(self) -> None:
        """Register default runtime collectors and launch the lag sampler.

        Must be called from a running event loop. Only the first call on an
        enabled registry has any effect.
        """

        if self._state != "uninitialized":
            return
        if not self._collect_default_metrics:
            logger.info("default_metrics_skipped")
            return

        ProcessCollector(registry=self._registry)
        PlatformCollector(registry=self._registry)
        GCCollector(registry=self._registry)
        self._event_loop_lag = Gauge(
            EVENT_LOOP_LAG_METRIC,
            "Delay between a scheduled event-loop wakeup and its execution",
            registry=self._registry,
        )
        self._lag_task = asyncio.get_running_loop().create_task(
            self._sample_event_loop_lag(), name="safenet-event-loop-lag"
        )
        self._state = "collecting"
        logger.info(
            "default_metrics_started",
            extra={"lag_interval_seconds": self._lag_interval_seconds},
        )

    async def stop(self) -> None:
        """Cancel the lag sampler and wait for it to finish."""

        task = self._lag_task
        self._lag_task = None
        if self._state == "collecting":
            self._state = "stopped"
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("default_metrics_stopped")

    async def export(self, timeout: float | None = None) -> bytes:
        """Render every registered metric in the Prometheus text format.

        Rendering happens in a worker thread. ``timeout`` bounds the wait in
        seconds; ``None`` or ``0`` waits indefinitely.
        """

        render = asyncio.to_thread(generate_latest, self._registry)
        if timeout:
            return await asyncio.wait_for(render, timeout)
        return await render

    async def _sample_event_loop_lag(self) -> None:
        loop = asyncio.get_running_loop()
        interval = self._lag_interval_seconds
        gauge = self._event_loop_lag
        assert gauge is not None
        while True:
            scheduled = loop.time()
            await asyncio.sleep(interval)
            gauge.set(max(loop.time() - scheduled - interval, 0.0))
