"""
Temperature Service

Orchestrates the two provider calls for one CEP: address first, weather
second. The weather provider is only called once the address resolved.
"""

import structlog

from cepweather_common.domain import TemperatureConversion, validate_cep
from cepweather_common.errors import NotFoundError
from cepweather_common.tracing import Span
from weather_service.clients import AddressResolver, WeatherProvider

logger = structlog.get_logger()


class TemperatureService:
    def __init__(self, addresses: AddressResolver, weather: WeatherProvider) -> None:
        self._addresses = addresses
        self._weather = weather

    async def temperature_for(self, cep: str, parent: Span | None = None) -> TemperatureConversion:
        """Resolve ``cep`` and return the current temperature of its locality.

        Raises:
            InvalidInputError: ``cep`` is not eight digits.
            NotFoundError: ViaCEP has no address for ``cep``.
            UpstreamError: either provider failed.
        """
        cep = validate_cep(cep)

        address = await self._addresses.resolve(cep, parent=parent)
        if not address.found:
            raise NotFoundError(cep=cep)

        reading = await self._weather.fetch(address.locality, parent=parent)
        conversion = TemperatureConversion.from_provider(
            celsius=reading.temperature_celsius,
            fahrenheit=reading.temperature_fahrenheit,
        )
        logger.info("temperature_resolved", locality=address.locality, temp_c=conversion.celsius)
        return conversion
