"""Public API routes."""

from safenet.api.routes import router

__all__ = ["router"]
