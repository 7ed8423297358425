"""Request/response logging middleware."""

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from cepweather_common.tracing import TraceContextPropagator

logger = structlog.get_logger()

_SKIP_PATHS = frozenset({"/health"})


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with the trace it arrived in.

    When the request carries a ``traceparent`` header, its trace id and the
    caller's span id are bound to the log context as ``trace_id`` and
    ``parent_span_id`` before ``request_started`` is written, so the request
    lines of the downstream hop share the trace id of the spans they wrap.

    Events: ``request_started``, ``request_completed`` (with ``status_code`` and
    ``duration_ms``) and ``request_failed`` when an exception escapes every
    handler. ``/health`` is not logged.
    """

    def __init__(self, app: ASGIApp, propagator: TraceContextPropagator | None = None) -> None:
        super().__init__(app)
        self.propagator = propagator or TraceContextPropagator()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        remote = self.propagator.extract(request.headers)
        if remote is not None:
            structlog.contextvars.bind_contextvars(
                trace_id=remote.trace_id, parent_span_id=remote.span_id
            )
        log = logger.bind(method=request.method, path=request.url.path)

        start = time.perf_counter()
        log.info(
            "request_started",
            client_ip=request.client.host if request.client else None,
            traced=remote is not None,
        )
        try:
            response = await call_next(request)
        except Exception:
            log.error("request_failed", duration_ms=_elapsed_ms(start), exc_info=True)
            raise

        if response.status_code >= 500:
            log_method = log.error
        elif response.status_code >= 400:
            log_method = log.warning
        else:
            log_method = log.info
        log_method(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(start),
        )
        return response
