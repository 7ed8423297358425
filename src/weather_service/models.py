"""Provider payload models. Only the fields the service reads are declared."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _is_error_flag(value: Any) -> bool:
    # ViaCEP has sent the flag both as a JSON boolean and as the string "true".
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True


class Address(BaseModel):
    """Address resolved from a CEP. ``found`` is false when ViaCEP reports no match."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    cep: str = ""
    street: str = Field(default="", alias="logradouro")
    complement: str = Field(default="", alias="complemento")
    neighborhood: str = Field(default="", alias="bairro")
    locality: str = Field(default="", alias="localidade")
    state: str = Field(default="", alias="uf")
    ibge_code: str = Field(default="", alias="ibge")
    found: bool = True

    @classmethod
    def from_viacep(cls, cep: str, payload: dict[str, Any]) -> "Address":
        if _is_error_flag(payload.get("erro")):
            return cls(cep=cep, found=False)
        return cls.model_validate({**payload, "found": True})


class _Location(BaseModel):
    name: str = ""


class _CurrentConditions(BaseModel):
    temp_c: float
    temp_f: float


class _CurrentWeatherPayload(BaseModel):
    location: _Location = Field(default_factory=_Location)
    current: _CurrentConditions


class WeatherReading(BaseModel):
    """Current temperature as reported by the weather provider."""

    model_config = ConfigDict(frozen=True)

    temperature_celsius: float
    temperature_fahrenheit: float
    location_name: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "WeatherReading":
        """Parse a ``current.json`` response; raises ``pydantic.ValidationError``."""
        parsed = _CurrentWeatherPayload.model_validate(payload)
        return cls(
            temperature_celsius=parsed.current.temp_c,
            temperature_fahrenheit=parsed.current.temp_f,
            location_name=parsed.location.name,
        )
