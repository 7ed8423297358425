"""
Weather Service Client

Forwards a validated CEP to the weather service. The caller's span travels in
the ``traceparent`` header and the request id in ``X-Request-ID``.

The downstream status decides the error class: 404 becomes ``NotFoundError``,
anything else that is not 200 becomes ``UpstreamError``.
"""

import httpx
import structlog
from pydantic import ValidationError

from cepweather_common.domain import TemperatureConversion
from cepweather_common.errors import NotFoundError, UpstreamError
from cepweather_common.logging import log_performance
from cepweather_common.middleware import REQUEST_ID_HEADER
from cepweather_common.tracing import Span, Tracer

logger = structlog.get_logger()


class WeatherServiceClient:
    """Client for the weather service's ``GET /?cep=`` endpoint."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str, tracer: Tracer) -> None:
        self._http = http_client
        self.base_url = base_url.rstrip("/")
        self._tracer = tracer

    async def temperature_for(
        self, cep: str, span: Span, request_id: str | None = None
    ) -> TemperatureConversion:
        headers: dict[str, str] = {}
        self._tracer.inject(span, headers)
        if request_id:
            headers[REQUEST_ID_HEADER] = request_id

        with log_performance(logger, "weather_service_request", upstream="weather-service"):
            try:
                response = await self._http.get(
                    f"{self.base_url}/", params={"cep": cep}, headers=headers
                )
            except httpx.HTTPError as exc:
                raise UpstreamError(
                    "external error - weather service", upstream="weather-service"
                ) from exc

            if response.status_code == 404:
                raise NotFoundError(cep=cep)
            if response.status_code != 200:
                raise UpstreamError(
                    "external error - weather service",
                    upstream="weather-service",
                    upstream_status=response.status_code,
                )

            try:
                return TemperatureConversion.model_validate(response.json())
            except (ValueError, ValidationError) as exc:
                raise UpstreamError(
                    "unexpected weather service payload", upstream="weather-service"
                ) from exc
