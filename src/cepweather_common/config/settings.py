"""Environment-based service configuration."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """Settings shared by every service, read from environment variables.

    Services subclass this and set their own ``env_prefix``.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    service_name: str = Field(default="cep-weather", description="Name reported in logs and spans")
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "dev"] = Field(default="json", description="Log renderer")
    request_timeout: float = Field(
        default=5.0, gt=0, description="Outbound HTTP timeout in seconds"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()
