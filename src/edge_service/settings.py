"""
Edge Service Settings

All settings can be overridden via ``EDGE_*`` environment variables.
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from cepweather_common.config import ServiceSettings


class EdgeSettings(ServiceSettings):
    """Edge service configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = Field(default="service-a", description="Name reported in logs and spans")
    port: int = Field(default=8082, description="Server port")
    weather_service_url: str = Field(
        default="http://goapp-b:8083", description="Base URL of the weather service"
    )
