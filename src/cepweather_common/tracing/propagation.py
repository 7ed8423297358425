"""
W3C Trace Context propagation.

The sending side writes the active span into a ``traceparent`` header; the
receiving side reads it back into a remote ``SpanContext`` that becomes the
parent of its request span.
"""

import re
from collections.abc import Mapping, MutableMapping

from cepweather_common.tracing.context import SpanContext

TRACEPARENT_HEADER = "traceparent"

_VERSION_RE = re.compile(r"[0-9a-f]{2}")
_TRACE_ID_RE = re.compile(r"[0-9a-f]{32}")
_SPAN_ID_RE = re.compile(r"[0-9a-f]{16}")
_INVALID_TRACE_ID = "0" * 32
_INVALID_SPAN_ID = "0" * 16


def _header_value(carrier: Mapping[str, str], name: str) -> str | None:
    value = carrier.get(name)
    if value is not None:
        return value
    for key, candidate in carrier.items():
        if key.lower() == name:
            return candidate
    return None


class TraceContextPropagator:
    """Inject and extract span context using the ``traceparent`` header."""

    def inject(self, context: SpanContext, carrier: MutableMapping[str, str]) -> None:
        carrier[TRACEPARENT_HEADER] = f"00-{context.trace_id}-{context.span_id}-{context.trace_flags}"

    def extract(self, carrier: Mapping[str, str]) -> SpanContext | None:
        """Return the remote context, or ``None`` if the header is absent or malformed."""
        header = _header_value(carrier, TRACEPARENT_HEADER)
        if not header:
            return None

        parts = header.strip().split("-")
        if len(parts) < 4:
            return None
        version, trace_id, span_id, flags = parts[:4]
        if not _VERSION_RE.fullmatch(version) or version == "ff":
            return None
        # Version 00 has exactly four fields; later versions may append more.
        if version == "00" and len(parts) != 4:
            return None
        if not _TRACE_ID_RE.fullmatch(trace_id) or trace_id == _INVALID_TRACE_ID:
            return None
        if not _SPAN_ID_RE.fullmatch(span_id) or span_id == _INVALID_SPAN_ID:
            return None
        if not _VERSION_RE.fullmatch(flags):
            return None

        return SpanContext(trace_id=trace_id, span_id=span_id, trace_flags=flags, is_remote=True)
