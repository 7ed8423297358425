"""
Tracer

Built once per application and passed to every component that opens spans.

Usage:
    tracer = Tracer("service-a")

    with tracer.span("start") as span:
        headers = {}
        tracer.inject(span, headers)
        ...

    # Receiving side
    parent = tracer.extract(request.headers)
    with tracer.span("start", parent=parent) as span:
        ...
"""

import uuid
from collections.abc import Generator, Mapping, MutableMapping
from contextlib import contextmanager

import structlog

from cepweather_common.tracing.context import Span, SpanContext
from cepweather_common.tracing.exporters import LoggingSpanExporter, SpanExporter
from cepweather_common.tracing.propagation import TraceContextPropagator

logger = structlog.get_logger()


class Tracer:
    """Creates spans for one service and exports them when they end."""

    def __init__(
        self,
        service_name: str,
        exporter: SpanExporter | None = None,
        propagator: TraceContextPropagator | None = None,
    ) -> None:
        self.service_name = service_name
        self.exporter = exporter or LoggingSpanExporter()
        self.propagator = propagator or TraceContextPropagator()

    def start_span(self, name: str, parent: Span | SpanContext | None = None) -> Span:
        """Start a span; a child shares its parent's trace id."""
        parent_context = parent.context if isinstance(parent, Span) else parent
        if parent_context is None:
            trace_id = uuid.uuid4().hex
            parent_span_id = None
            trace_flags = "01"
        else:
            trace_id = parent_context.trace_id
            parent_span_id = parent_context.span_id
            trace_flags = parent_context.trace_flags

        span = Span(
            name=name,
            context=SpanContext(
                trace_id=trace_id, span_id=uuid.uuid4().hex[:16], trace_flags=trace_flags
            ),
            service_name=self.service_name,
            parent_span_id=parent_span_id,
            on_end=self._export,
        )
        logger.debug(
            "span_started",
            span_name=name,
            trace_id=trace_id,
            span_id=span.context.span_id,
            parent_span_id=parent_span_id,
        )
        return span

    @contextmanager
    def span(self, name: str, parent: Span | SpanContext | None = None) -> Generator[Span, None, None]:
        """
        Open a span, run the block, and end the span on every exit path.

        The span's ids are bound to the structlog context while the block runs.
        """
        span = self.start_span(name, parent)
        tokens = structlog.contextvars.bind_contextvars(
            trace_id=span.context.trace_id, span_id=span.context.span_id
        )
        try:
            yield span
        except BaseException as exc:
            span.end("error", error_message=str(exc) or type(exc).__name__)
            raise
        finally:
            span.end("success")
            structlog.contextvars.reset_contextvars(**tokens)

    def inject(self, span: Span | SpanContext, carrier: MutableMapping[str, str]) -> None:
        context = span.context if isinstance(span, Span) else span
        self.propagator.inject(context, carrier)

    def extract(self, carrier: Mapping[str, str]) -> SpanContext | None:
        return self.propagator.extract(carrier)

    def _export(self, span: Span) -> None:
        try:
            self.exporter.export(span)
        except Exception:
            logger.error("span_export_failed", span_name=span.name, exc_info=True)
