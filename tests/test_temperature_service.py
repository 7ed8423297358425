"""Tests for the orchestration of address and weather lookups."""

from unittest.mock import AsyncMock

import pytest

from cepweather_common.errors import InvalidInputError, NotFoundError, UpstreamError
from weather_service.models import Address, WeatherReading
from weather_service.service import TemperatureService


def make_service(address: Address | Exception, reading: WeatherReading | Exception):
    addresses = AsyncMock()
    weather = AsyncMock()
    if isinstance(address, Exception):
        addresses.resolve.side_effect = address
    else:
        addresses.resolve.return_value = address
    if isinstance(reading, Exception):
        weather.fetch.side_effect = reading
    else:
        weather.fetch.return_value = reading
    return TemperatureService(addresses, weather), addresses, weather


SAO_PAULO = Address(cep="01001-000", locality="São Paulo", state="SP")
READING = WeatherReading(temperature_celsius=25.0, temperature_fahrenheit=77.0)


class TestTemperatureService:
    @pytest.mark.asyncio
    async def test_converts_reading(self):
        service, addresses, weather = make_service(SAO_PAULO, READING)
        conversion = await service.temperature_for("01001000")
        assert conversion.to_response() == {"temp_C": 25.0, "temp_F": 77.0, "temp_K": 298.0}
        addresses.resolve.assert_awaited_once_with("01001000", parent=None)
        weather.fetch.assert_awaited_once_with("São Paulo", parent=None)

    @pytest.mark.asyncio
    async def test_parent_span_passed_to_both_clients(self):
        service, addresses, weather = make_service(SAO_PAULO, READING)
        parent = object()
        await service.temperature_for("01001000", parent=parent)
        assert addresses.resolve.await_args.kwargs["parent"] is parent
        assert weather.fetch.await_args.kwargs["parent"] is parent

    @pytest.mark.asyncio
    async def test_invalid_cep_makes_no_calls(self):
        service, addresses, weather = make_service(SAO_PAULO, READING)
        with pytest.raises(InvalidInputError):
            await service.temperature_for("1234")
        addresses.resolve.assert_not_awaited()
        weather.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unresolved_address_is_not_found(self):
        service, _, weather = make_service(Address(cep="99999999", found=False), READING)
        with pytest.raises(NotFoundError):
            await service.temperature_for("99999999")
        weather.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_address_failure_propagates(self):
        service, _, weather = make_service(UpstreamError("down", upstream="viacep"), READING)
        with pytest.raises(UpstreamError):
            await service.temperature_for("01001000")
        weather.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_weather_failure_propagates(self):
        service, _, _ = make_service(SAO_PAULO, UpstreamError("down", upstream="weatherapi"))
        with pytest.raises(UpstreamError) as exc_info:
            await service.temperature_for("01001000")
        assert not isinstance(exc_info.value, NotFoundError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("celsius", [-12.5, 0.0, 19.9, 41.3])
    async def test_kelvin_offset(self, celsius):
        reading = WeatherReading(temperature_celsius=celsius, temperature_fahrenheit=1.0)
        service, _, _ = make_service(SAO_PAULO, reading)
        conversion = await service.temperature_for("01001000")
        assert conversion.kelvin == celsius + 273.0
        assert conversion.celsius == celsius
        assert conversion.fahrenheit == 1.0
