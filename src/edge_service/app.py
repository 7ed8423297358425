"""
Edge Service Application

FastAPI application factory for the caller-facing hop.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import structlog
from fastapi import FastAPI

from cepweather_common.errors.handlers import register_error_handlers
from cepweather_common.health import create_health_router
from cepweather_common.middleware import RequestIDMiddleware, RequestLoggingMiddleware
from cepweather_common.tracing import Tracer
from edge_service import __version__
from edge_service.client import WeatherServiceClient
from edge_service.routes import router
from edge_service.settings import EdgeSettings

logger = structlog.get_logger()


def create_app(
    settings: EdgeSettings | None = None,
    tracer: Tracer | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the edge service.

    Args:
        settings: Service configuration; read from the environment when omitted.
        tracer: Tracer for the per-request span.
        transport: Optional transport for the client that calls the weather service.
    """
    settings = settings or EdgeSettings()
    tracer = tracer or Tracer(settings.service_name)
    http_client = httpx.AsyncClient(timeout=settings.request_timeout, transport=transport)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("service_starting", weather_service_url=settings.weather_service_url)
        try:
            yield
        finally:
            await http_client.aclose()
            logger.info("service_stopped")

    app = FastAPI(
        title="CEP Weather - Edge Service",
        description="Validates a CEP and returns the current temperature of its city",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.tracer = tracer
    app.state.weather_client = WeatherServiceClient(
        http_client, settings.weather_service_url, tracer
    )

    app.add_middleware(RequestLoggingMiddleware, propagator=tracer.propagator)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(
        create_health_router(
            service_name=settings.service_name,
            version=__version__,
            upstreams={"weather-service": settings.weather_service_url},
        )
    )
    app.include_router(router)
    return app
