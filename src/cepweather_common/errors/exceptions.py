"""Structured exception hierarchy for the CEP weather services."""

from typing import Any


class CepWeatherError(Exception):
    """Base exception for all application errors.

    Attributes:
        status_code: HTTP status code to return when this error is raised in a handler.
        error_code: Machine-readable error identifier for clients.
        context: Arbitrary key-value pairs providing additional error context.
    """

    status_code: int = 500

    def __init__(self, message: str, error_code: str = "INTERNAL_ERROR", **context: Any) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context


class InvalidInputError(CepWeatherError):
    """The postal code is not exactly eight decimal digits."""

    status_code: int = 422

    def __init__(self, message: str = "invalid zipcode", **context: Any) -> None:
        super().__init__(message, error_code="INVALID_ZIPCODE", **context)


class NotFoundError(CepWeatherError):
    """The postal code is well formed but does not resolve to an address."""

    status_code: int = 404

    def __init__(self, message: str = "can not find zipcode", **context: Any) -> None:
        super().__init__(message, error_code="ZIPCODE_NOT_FOUND", **context)


class UpstreamError(CepWeatherError):
    """An external dependency failed: transport, status or payload."""

    status_code: int = 400

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="UPSTREAM_ERROR", **context)
