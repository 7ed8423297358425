"""
Weather Service Application

FastAPI application factory. Everything the routes need (settings, tracer,
provider clients) is built here and hung on ``app.state``; there is no
module-level state.
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
from weather_service import __version__
from weather_service.clients import ViaCepClient, WeatherApiClient
from weather_service.routes import router
from weather_service.service import TemperatureService
from weather_service.settings import WeatherServiceSettings

logger = structlog.get_logger()


def create_app(
    settings: WeatherServiceSettings | None = None,
    tracer: Tracer | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the weather service.

    Args:
        settings: Service configuration; read from the environment when omitted.
        tracer: Tracer shared by the request and provider spans.
        transport: Optional transport for the outbound ``httpx`` client.
    """
    settings = settings or WeatherServiceSettings()
    tracer = tracer or Tracer(settings.service_name)
    http_client = httpx.AsyncClient(timeout=settings.request_timeout, transport=transport)
    service = TemperatureService(
        addresses=ViaCepClient(http_client, settings.viacep_url, tracer),
        weather=WeatherApiClient(
            http_client, settings.weather_api_url, settings.weather_api_key, tracer
        ),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "service_starting",
            viacep_url=settings.viacep_url,
            weather_api_url=settings.weather_api_url,
        )
        try:
            yield
        finally:
            await http_client.aclose()
            logger.info("service_stopped")

    app = FastAPI(
        title="CEP Weather - Weather Service",
        description="Resolves a CEP to its locality and reports the current temperature",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.tracer = tracer
    app.state.temperature_service = service

    app.add_middleware(RequestLoggingMiddleware, propagator=tracer.propagator)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(
        create_health_router(
            service_name=settings.service_name,
            version=__version__,
            upstreams={"viacep": settings.viacep_url, "weatherapi": settings.weather_api_url},
            checks={"weather_api_key": lambda: bool(settings.weather_api_key)},
        )
    )
    app.include_router(router)
    return app
