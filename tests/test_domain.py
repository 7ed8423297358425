"""Tests for CEP validation and temperature conversion."""

import pytest


class TestValidateCep:
    @pytest.mark.parametrize("cep", ["01001000", "99999999", "00000000"])
    def test_accepts_eight_digits(self, cep):
        from cepweather_common.domain import validate_cep

        assert validate_cep(cep) == cep

    @pytest.mark.parametrize(
        "cep",
        ["", "0", "0100100", "010010000", "01001-000", "0100100O", "01001000\n", "٠١٠٠١٠٠٠"],
    )
    def test_rejects_everything_else(self, cep):
        from cepweather_common.domain import validate_cep
        from cepweather_common.errors import InvalidInputError

        with pytest.raises(InvalidInputError) as exc_info:
            validate_cep(cep)
        assert exc_info.value.status_code == 422
        assert str(exc_info.value) == "invalid zipcode"

    @pytest.mark.parametrize("value", [None, 1001000, b"01001000"])
    def test_rejects_non_strings(self, value):
        from cepweather_common.domain import validate_cep
        from cepweather_common.errors import InvalidInputError

        with pytest.raises(InvalidInputError):
            validate_cep(value)


class TestTemperatureConversion:
    @pytest.mark.parametrize("celsius", [25.0, 0.0, -40.0, 36.6, 100.0])
    def test_kelvin_uses_fixed_offset(self, celsius):
        from cepweather_common.domain import TemperatureConversion

        conversion = TemperatureConversion.from_provider(celsius=celsius, fahrenheit=0.0)
        assert conversion.kelvin == celsius + 273.0

    def test_fahrenheit_is_not_recomputed(self):
        from cepweather_common.domain import TemperatureConversion

        conversion = TemperatureConversion.from_provider(celsius=25.0, fahrenheit=77.4)
        assert conversion.fahrenheit == 77.4

    def test_response_uses_wire_names(self):
        from cepweather_common.domain import TemperatureConversion

        conversion = TemperatureConversion.from_provider(celsius=25.0, fahrenheit=77.0)
        assert conversion.to_response() == {"temp_C": 25.0, "temp_F": 77.0, "temp_K": 298.0}

    def test_parses_wire_names(self):
        from cepweather_common.domain import TemperatureConversion

        conversion = TemperatureConversion.model_validate({"temp_C": 1, "temp_F": 2, "temp_K": 3})
        assert (conversion.celsius, conversion.fahrenheit, conversion.kelvin) == (1.0, 2.0, 3.0)
