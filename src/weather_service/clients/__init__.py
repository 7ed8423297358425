"""Clients for the external address and weather providers."""

from weather_service.clients.protocol import AddressResolver, WeatherProvider
from weather_service.clients.viacep import ViaCepClient
from weather_service.clients.weatherapi import WeatherApiClient

__all__ = ["AddressResolver", "ViaCepClient", "WeatherApiClient", "WeatherProvider"]
