"""System routes: liveness and Prometheus scrape endpoint."""

from safenet.system.routes import get_metrics_registry, router

__all__ = ["get_metrics_registry", "router"]
