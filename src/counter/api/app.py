"""Counter FastAPI application factory."""

import asyncio
import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from protean.domain import Domain

from counter.api.errors import register_error_handlers
from counter.api.routes import health_router, order_router
from counter.catalog import create_gateway
from counter.catalog.port import CatalogGateway
from counter.settings import Settings
from counter.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


def create_app(domain: Domain, settings: Settings, gateway: CatalogGateway | None = None) -> FastAPI:
    """Build the HTTP application around an initialized domain.

    ``gateway`` defaults to the HTTP catalog adapter configured by ``settings``.
    """
    app = FastAPI(
        title="Counter API",
        description="Point-of-sale order intake for barista and kitchen orders",
    )
    app.state.domain = domain
    app.state.settings = settings
    app.state.catalog_gateway = gateway or create_gateway(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the domain context, bound the request by ``settings.request_timeout``
        and log every request with its latency.

        A request that runs past the timeout is answered with 408. Work already
        handed to the route is not cancelled.
        """
        clear_context()
        add_context(request_id=uuid4().hex, method=request.method, path=request.url.path)
        started = time.perf_counter()

        try:
            with domain.domain_context():
                response = await asyncio.wait_for(call_next(request), timeout=settings.request_timeout)
        except TimeoutError:
            logger.warning("request_timed_out", timeout=settings.request_timeout)
            response = PlainTextResponse("Request timed out", status_code=408)

        logger.info(
            "request_completed",
            status_code=response.status_code,
            latency_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        clear_context()
        return response

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(order_router)

    return app
