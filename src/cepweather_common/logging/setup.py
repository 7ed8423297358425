"""Structlog configuration for the CEP weather services."""

import logging
import sys

import structlog

from cepweather_common.config import ServiceSettings
from cepweather_common.logging.processors import add_service_name, censor_sensitive_data

# httpx logs every outbound call and uvicorn every inbound one; the clients
# and RequestLoggingMiddleware already do, with request and trace ids.
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _shared_processors(service_name: str) -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_service_name(service_name),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        censor_sensitive_data,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "dev":
        return structlog.dev.ConsoleRenderer(colors=True)
    # Localities such as "São Paulo" stay readable in the JSON lines.
    return structlog.processors.JSONRenderer(ensure_ascii=False)


def setup_logging(service_name: str, log_level: str = "INFO", log_format: str = "json") -> None:
    """Route structlog and stdlib logging through one stderr handler.

    ``log_format`` is ``"json"`` (one object per line) or ``"dev"``.
    """
    shared = _shared_processors(service_name)
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_format),
            ],
        )
    )
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def configure_service_logging(settings: ServiceSettings) -> None:
    """Configure logging from a service's settings; called by the entry points."""
    setup_logging(settings.service_name, settings.log_level, settings.log_format)
