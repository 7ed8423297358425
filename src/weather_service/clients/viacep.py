"""
ViaCEP Client

Resolves a CEP to an address through ``GET /ws/{cep}/json/``.
"""

import httpx
import structlog
from pydantic import ValidationError

from cepweather_common.errors import UpstreamError
from cepweather_common.logging import log_performance
from cepweather_common.tracing import Span, Tracer
from weather_service.models import Address

logger = structlog.get_logger()

SPAN_NAME = "getting location"


class ViaCepClient:
    """Client for the ViaCEP address API.

    A payload carrying the ``erro`` flag is a successful lookup of an address
    that does not exist and yields ``Address(found=False)``. Every other
    failure raises ``UpstreamError``.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str, tracer: Tracer) -> None:
        self._http = http_client
        self.base_url = base_url.rstrip("/")
        self._tracer = tracer

    async def resolve(self, cep: str, parent: Span | None = None) -> Address:
        with self._tracer.span(SPAN_NAME, parent=parent):
            with log_performance(logger, "address_lookup", upstream="viacep"):
                return await self._lookup(cep)

    async def _lookup(self, cep: str) -> Address:
        try:
            response = await self._http.get(f"{self.base_url}/ws/{cep}/json/")
        except httpx.HTTPError as exc:
            raise UpstreamError("address lookup failed", upstream="viacep") from exc

        if not response.is_success:
            raise UpstreamError(
                "address lookup failed",
                upstream="viacep",
                upstream_status=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError("address payload is not valid JSON", upstream="viacep") from exc
        if not isinstance(payload, dict):
            raise UpstreamError("address payload is not an object", upstream="viacep")

        try:
            address = Address.from_viacep(cep, payload)
        except ValidationError as exc:
            raise UpstreamError("unexpected address payload", upstream="viacep") from exc

        logger.info("address_resolved", found=address.found, locality=address.locality or None)
        return address
