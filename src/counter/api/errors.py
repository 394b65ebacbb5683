"""HTTP mapping for order placement errors."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from counter.catalog.port import CatalogUnavailable
from counter.order.errors import EmptyOrder, PlacementFailed
from counter.utils.logging import get_logger

logger = get_logger(__name__)


async def _empty_order(request: Request, exc: EmptyOrder) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=400, content={"error": exc.messages})


async def _catalog_unavailable(request: Request, exc: CatalogUnavailable) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=502, content={"error": str(exc)})


async def _placement_failed(request: Request, exc: PlacementFailed) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
    logger.exception("unhandled_error", error=str(exc))
    return JSONResponse(status_code=500, content={"error": f"Unhandled internal error: {exc}"})


def register_error_handlers(app: FastAPI) -> None:
    """Register Protean's default handlers plus the order placement ones."""
    register_exception_handlers(app)

    app.add_exception_handler(EmptyOrder, _empty_order)
    app.add_exception_handler(CatalogUnavailable, _catalog_unavailable)
    app.add_exception_handler(PlacementFailed, _placement_failed)
    app.add_exception_handler(Exception, _unhandled)
