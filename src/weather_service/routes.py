"""HTTP routes of the weather service."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from cepweather_common.tracing import Tracer
from weather_service.service import TemperatureService

REQUEST_SPAN_NAME = "start"

router = APIRouter()


def get_tracer(request: Request) -> Tracer:
    return request.app.state.tracer


def get_temperature_service(request: Request) -> TemperatureService:
    return request.app.state.temperature_service


@router.get("/")
async def get_temperature(
    request: Request,
    cep: str = "",
    tracer: Tracer = Depends(get_tracer),
    service: TemperatureService = Depends(get_temperature_service),
) -> JSONResponse:
    """Return ``temp_C``/``temp_F``/``temp_K`` for the CEP in the query string."""
    parent = tracer.extract(request.headers)
    with tracer.span(REQUEST_SPAN_NAME, parent=parent) as span:
        conversion = await service.temperature_for(cep, parent=span)
    return JSONResponse(status_code=200, content=conversion.to_response())
