"""Health check utilities for the CEP weather services."""

from cepweather_common.health.endpoints import create_health_router

__all__ = ["create_health_router"]
