"""
Span and span context.

A span is a named, time-bounded unit of work inside a trace. It carries no
business data: only its name, its identifiers and the id of its parent.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class SpanContext:
    """Identifiers that travel with a span, locally or across a process boundary."""

    trace_id: str
    span_id: str
    trace_flags: str = "01"
    is_remote: bool = False


@dataclass
class Span:
    """
    A single span within a trace.

    ``end()`` takes effect exactly once; later calls are ignored.
    """

    name: str
    context: SpanContext
    service_name: str
    parent_span_id: str | None = None
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None
    status: str = "in_progress"  # in_progress, success, error
    error_message: str | None = None
    on_end: Callable[["Span"], None] | None = field(default=None, repr=False, compare=False)

    @property
    def is_ended(self) -> bool:
        return self.end_time is not None

    @property
    def duration_ms(self) -> float | None:
        """Get span duration in milliseconds."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time) * 1000

    def end(self, status: str = "success", error_message: str | None = None) -> None:
        """End the span and hand it to the tracer's sink."""
        if self.end_time is not None:
            return
        self.end_time = time.time()
        self.status = status
        if error_message:
            self.error_message = error_message
        if self.on_end is not None:
            self.on_end(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert span to dictionary for logging/export."""
        return {
            "trace_id": self.context.trace_id,
            "span_id": self.context.span_id,
            "parent_span_id": self.parent_span_id,
            "name": self.name,
            "service_name": self.service_name,
            "start_time": datetime.fromtimestamp(self.start_time, tz=UTC).isoformat(),
            "end_time": datetime.fromtimestamp(self.end_time, tz=UTC).isoformat()
            if self.end_time
            else None,
            "duration_ms": self.duration_ms,
            "status": self.status,
            "error_message": self.error_message,
        }
