"""Entry point: ``weather-service``."""

import uvicorn

from cepweather_common.logging import configure_service_logging
from weather_service.app import create_app
from weather_service.settings import WeatherServiceSettings


def main() -> None:
    settings = WeatherServiceSettings()
    configure_service_logging(settings)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
