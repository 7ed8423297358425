"""HTTP routes of the edge service."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from cepweather_common.domain import validate_cep
from cepweather_common.tracing import Tracer
from edge_service.client import WeatherServiceClient

REQUEST_SPAN_NAME = "start"

router = APIRouter()


class CepRequest(BaseModel):
    # A missing or null cep is an invalid cep (422), not a malformed body (400).
    cep: str | None = None


def get_tracer(request: Request) -> Tracer:
    return request.app.state.tracer


def get_weather_client(request: Request) -> WeatherServiceClient:
    return request.app.state.weather_client


@router.post("/")
async def get_temperature(
    request: Request,
    body: CepRequest,
    tracer: Tracer = Depends(get_tracer),
    weather: WeatherServiceClient = Depends(get_weather_client),
) -> JSONResponse:
    """Validate the CEP and return the weather service's answer unchanged."""
    cep = validate_cep(body.cep or "")
    request_id = getattr(request.state, "request_id", None)
    with tracer.span(REQUEST_SPAN_NAME) as span:
        conversion = await weather.temperature_for(cep, span, request_id=request_id)
    return JSONResponse(status_code=200, content=conversion.to_response())
