"""CEP Weather Common - shared utilities for the edge and weather services."""

__version__ = "0.1.0"

from cepweather_common.config import ServiceSettings
from cepweather_common.domain import TemperatureConversion, validate_cep
from cepweather_common.errors import (
    CepWeatherError,
    InvalidInputError,
    NotFoundError,
    UpstreamError,
)
from cepweather_common.errors.handlers import register_error_handlers
from cepweather_common.health import create_health_router
from cepweather_common.logging import configure_service_logging, log_performance, setup_logging
from cepweather_common.middleware import RequestIDMiddleware, RequestLoggingMiddleware
from cepweather_common.tracing import Span, SpanContext, TraceContextPropagator, Tracer

__all__ = [
    "CepWeatherError",
    "InvalidInputError",
    "NotFoundError",
    "RequestIDMiddleware",
    "RequestLoggingMiddleware",
    "ServiceSettings",
    "Span",
    "SpanContext",
    "TemperatureConversion",
    "TraceContextPropagator",
    "Tracer",
    "UpstreamError",
    "configure_service_logging",
    "create_health_router",
    "log_performance",
    "register_error_handlers",
    "setup_logging",
    "validate_cep",
]
