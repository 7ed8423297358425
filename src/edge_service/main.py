"""Entry point: ``edge-service``."""

import uvicorn

from cepweather_common.logging import configure_service_logging
from edge_service.app import create_app
from edge_service.settings import EdgeSettings


def main() -> None:
    settings = EdgeSettings()
    configure_service_logging(settings)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
