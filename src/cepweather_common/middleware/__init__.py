"""Shared FastAPI middleware for the CEP weather services."""

from cepweather_common.middleware.logging import RequestLoggingMiddleware
from cepweather_common.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware

__all__ = ["REQUEST_ID_HEADER", "RequestIDMiddleware", "RequestLoggingMiddleware"]
