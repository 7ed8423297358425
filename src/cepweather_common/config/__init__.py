"""Environment-based service configuration."""

from cepweather_common.config.settings import ServiceSettings

__all__ = ["ServiceSettings"]
