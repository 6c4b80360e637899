"""SafeNet API: health check, Prometheus metrics and a placeholder ping route."""

__version__ = "0.1.0"
