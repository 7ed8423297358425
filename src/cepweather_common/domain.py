"""
Domain value objects shared by the edge and weather services.

Both services validate postal codes on their own; neither trusts the other's
check. ``TemperatureConversion`` is the response body of both hops.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cepweather_common.errors import InvalidInputError

CEP_PATTERN = re.compile(r"[0-9]{8}")

# Fixed offset, deliberately not 273.15.
KELVIN_OFFSET = 273.0


def validate_cep(value: Any) -> str:
    """Return ``value`` if it is exactly eight decimal digits.

    Raises:
        InvalidInputError: for anything else, including non-strings.
    """
    if not isinstance(value, str) or CEP_PATTERN.fullmatch(value) is None:
        raise InvalidInputError()
    return value


class TemperatureConversion(BaseModel):
    """Current temperature in three units, serialised as ``temp_C``/``temp_F``/``temp_K``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    celsius: float = Field(alias="temp_C")
    fahrenheit: float = Field(alias="temp_F")
    kelvin: float = Field(alias="temp_K")

    @classmethod
    def from_provider(cls, celsius: float, fahrenheit: float) -> "TemperatureConversion":
        """Build from provider readings; only Kelvin is derived."""
        return cls(celsius=celsius, fahrenheit=fahrenheit, kelvin=celsius + KELVIN_OFFSET)

    def to_response(self) -> dict[str, float]:
        return self.model_dump(by_alias=True)
