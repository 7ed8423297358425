"""
Weather Service Settings

Type-safe configuration using Pydantic BaseSettings.
All settings can be overridden via ``WEATHER_SERVICE_*`` environment variables.
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from cepweather_common.config import ServiceSettings


class WeatherServiceSettings(ServiceSettings):
    """Downstream service configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = Field(default="service-b", description="Name reported in logs and spans")
    port: int = Field(default=8083, description="Server port")
    viacep_url: str = Field(default="http://viacep.com.br", description="ViaCEP base URL")
    weather_api_url: str = Field(
        default="http://api.weatherapi.com", description="WeatherAPI base URL"
    )
    weather_api_key: str = Field(default="", description="WeatherAPI key sent as the key parameter")
