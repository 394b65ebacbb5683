"""Counter domain API package."""

from counter.api.routes import health_router, order_router

__all__ = ["order_router", "health_router"]
