"""Structured error hierarchy for the CEP weather services."""

from cepweather_common.errors.exceptions import (
    CepWeatherError,
    InvalidInputError,
    NotFoundError,
    UpstreamError,
)

__all__ = [
    "CepWeatherError",
    "InvalidInputError",
    "NotFoundError",
    "UpstreamError",
]
