"""Structured logging for the CEP weather services."""

from cepweather_common.logging.performance import log_performance
from cepweather_common.logging.setup import configure_service_logging, setup_logging

__all__ = ["configure_service_logging", "log_performance", "setup_logging"]
