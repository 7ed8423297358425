"""
WeatherAPI Client

Fetches current conditions through ``GET /v1/current.json?q=<locality>&key=<key>``.
"""

import httpx
import structlog
from pydantic import ValidationError

from cepweather_common.errors import UpstreamError
from cepweather_common.logging import log_performance
from cepweather_common.tracing import Span, Tracer
from weather_service.models import WeatherReading

logger = structlog.get_logger()

SPAN_NAME = "getting weather"


class WeatherApiClient:
    """Client for the WeatherAPI ``current.json`` endpoint."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        api_key: str,
        tracer: Tracer,
    ) -> None:
        self._http = http_client
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._tracer = tracer

    async def fetch(self, locality: str, parent: Span | None = None) -> WeatherReading:
        with self._tracer.span(SPAN_NAME, parent=parent):
            with log_performance(logger, "weather_lookup", upstream="weatherapi"):
                return await self._current(locality)

    async def _current(self, locality: str) -> WeatherReading:
        # httpx encodes the locality, which may contain spaces and accents.
        try:
            response = await self._http.get(
                f"{self.base_url}/v1/current.json",
                params={"q": locality, "key": self._api_key},
            )
        except httpx.HTTPError as exc:
            raise UpstreamError("weather lookup failed", upstream="weatherapi") from exc

        if not response.is_success:
            raise UpstreamError(
                "weather lookup failed",
                upstream="weatherapi",
                upstream_status=response.status_code,
            )

        try:
            return WeatherReading.from_payload(response.json())
        except (ValueError, ValidationError) as exc:
            raise UpstreamError("unexpected weather payload", upstream="weatherapi") from exc
