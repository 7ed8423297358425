"""Span sinks. The tracer hands every ended span to exactly one exporter."""

from typing import Protocol

import structlog

from cepweather_common.tracing.context import Span

logger = structlog.get_logger()


class SpanExporter(Protocol):
    def export(self, span: Span) -> None: ...


class LoggingSpanExporter:
    """Write finished spans to the structured log."""

    def export(self, span: Span) -> None:
        logger.debug("span_finished", **span.to_dict())


class InMemorySpanExporter:
    """Keep finished spans in a list, in the order they ended."""

    def __init__(self) -> None:
        self.spans: list[Span] = []

    def export(self, span: Span) -> None:
        self.spans.append(span)

    def by_name(self, name: str) -> list[Span]:
        return [span for span in self.spans if span.name == name]

    def clear(self) -> None:
        self.spans.clear()
