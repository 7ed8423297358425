"""
Shared fixtures.

``ProviderStub`` stands in for ViaCEP and WeatherAPI behind an
``httpx.MockTransport``. The edge service reaches the weather service
in-process through ``httpx.ASGITransport``, so an edge request runs the whole
two-hop pipeline without a network.
"""

import httpx
import pytest

from cepweather_common.tracing import InMemorySpanExporter, Tracer
from edge_service.app import create_app as create_edge_app
from edge_service.settings import EdgeSettings
from weather_service.app import create_app as create_weather_app
from weather_service.settings import WeatherServiceSettings

VIACEP_HOST = "viacep.test"
WEATHER_API_HOST = "weatherapi.test"
WEATHER_SERVICE_HOST = "weather-service.test"
WEATHER_API_KEY = "test-key"

SAO_PAULO_ADDRESS = {
    "cep": "01001-000",
    "logradouro": "Praça da Sé",
    "complemento": "lado ímpar",
    "bairro": "Sé",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}


def weather_payload(name: str, temp_c: float, temp_f: float) -> dict:
    return {
        "location": {
            "name": name,
            "region": "Sao Paulo",
            "country": "Brazil",
            "lat": -23.53,
            "lon": -46.62,
            "tz_id": "America/Sao_Paulo",
            "localtime_epoch": 1741700000,
            "localtime": "2025-03-11 10:33",
        },
        "current": {
            "last_updated_epoch": 1741699800,
            "last_updated": "2025-03-11 10:30",
            "temp_c": temp_c,
            "temp_f": temp_f,
            "is_day": 1,
            "condition": {"text": "Partly cloudy", "icon": "//cdn/116.png", "code": 1003},
            "wind_kph": 11.2,
            "humidity": 70,
            "feelslike_c": 27.1,
        },
    }


class ProviderStub:
    """Fake ViaCEP + WeatherAPI that records every request it receives."""

    def __init__(self) -> None:
        self.addresses: dict[str, dict] = {"01001000": dict(SAO_PAULO_ADDRESS)}
        self.temperatures: dict[str, tuple[float, float]] = {"São Paulo": (25.0, 77.0)}
        self.address_status = 200
        self.weather_status = 200
        self.address_body: bytes | None = None
        self.weather_body: bytes | None = None
        self.unreachable: set[str] = set()
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if request.url.host == VIACEP_HOST:
            return self._viacep(request)
        if request.url.host == WEATHER_API_HOST:
            return self._weather(request)
        return httpx.Response(404)

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def _viacep(self, request: httpx.Request) -> httpx.Response:
        if self.address_status != 200:
            return httpx.Response(self.address_status, text="<h1>Bad Request</h1>")
        if self.address_body is not None:
            return httpx.Response(200, content=self.address_body)
        # /ws/{cep}/json/
        cep = request.url.path.split("/")[2]
        return httpx.Response(200, json=self.addresses.get(cep, {"erro": "true"}))

    def _weather(self, request: httpx.Request) -> httpx.Response:
        if request.url.params.get("key") != WEATHER_API_KEY:
            return httpx.Response(401, json={"error": {"code": 2006, "message": "API key is invalid."}})
        if self.weather_status != 200:
            return httpx.Response(self.weather_status, json={"error": {"code": 9999}})
        if self.weather_body is not None:
            return httpx.Response(200, content=self.weather_body)
        locality = request.url.params.get("q")
        if locality not in self.temperatures:
            return httpx.Response(
                400, json={"error": {"code": 1006, "message": "No matching location found."}}
            )
        temp_c, temp_f = self.temperatures[locality]
        return httpx.Response(200, json=weather_payload(locality, temp_c, temp_f))


class RecordingTransport(httpx.AsyncBaseTransport):
    """Delegating transport that remembers the requests sent through it."""

    def __init__(self, inner: httpx.AsyncBaseTransport) -> None:
        self.inner = inner
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return await self.inner.handle_async_request(request)


@pytest.fixture
def providers() -> ProviderStub:
    return ProviderStub()


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def weather_settings() -> WeatherServiceSettings:
    return WeatherServiceSettings(
        viacep_url=f"http://{VIACEP_HOST}",
        weather_api_url=f"http://{WEATHER_API_HOST}",
        weather_api_key=WEATHER_API_KEY,
    )


@pytest.fixture
def weather_app(weather_settings, providers, span_exporter):
    return create_weather_app(
        weather_settings,
        tracer=Tracer("service-b", exporter=span_exporter),
        transport=httpx.MockTransport(providers.handler),
    )


@pytest.fixture
def edge_transport(weather_app) -> RecordingTransport:
    return RecordingTransport(httpx.ASGITransport(app=weather_app))


@pytest.fixture
def edge_app(edge_transport, span_exporter):
    return create_edge_app(
        EdgeSettings(weather_service_url=f"http://{WEATHER_SERVICE_HOST}"),
        tracer=Tracer("service-a", exporter=span_exporter),
        transport=edge_transport,
    )
