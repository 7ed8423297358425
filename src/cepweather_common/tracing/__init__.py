"""
Tracing Module

Explicitly constructed tracer, spans with parent linkage, W3C trace context
propagation across HTTP hops, and pluggable span sinks.
"""

from cepweather_common.tracing.context import Span, SpanContext
from cepweather_common.tracing.exporters import (
    InMemorySpanExporter,
    LoggingSpanExporter,
    SpanExporter,
)
from cepweather_common.tracing.propagation import TRACEPARENT_HEADER, TraceContextPropagator
from cepweather_common.tracing.tracer import Tracer

__all__ = [
    "InMemorySpanExporter",
    "LoggingSpanExporter",
    "Span",
    "SpanContext",
    "SpanExporter",
    "TRACEPARENT_HEADER",
    "TraceContextPropagator",
    "Tracer",
]
