"""
Provider client protocols.

``TemperatureService`` type-hints against these rather than the concrete
HTTP clients.
"""

from typing import Protocol

from cepweather_common.tracing import Span
from weather_service.models import Address, WeatherReading


class AddressResolver(Protocol):
    async def resolve(self, cep: str, parent: Span | None = None) -> Address: ...


class WeatherProvider(Protocol):
    async def fetch(self, locality: str, parent: Span | None = None) -> WeatherReading: ...
