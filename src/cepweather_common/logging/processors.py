"""Structlog processors for the CEP weather services."""

from typing import Any

_SENSITIVE_KEYS = frozenset(
    {
        "password",
        "token",
        "access_token",
        "api_key",
        "apikey",
        "key",
        "secret",
        "authorization",
        "cookie",
    }
)


def censor_sensitive_data(logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Redact values for keys that look like secrets."""
    for key in event_dict:
        if key.lower() in _SENSITIVE_KEYS:
            event_dict[key] = "***REDACTED***"
    return event_dict


def add_service_name(service_name: str) -> Any:
    """Return a processor that binds service=<name> to every event."""

    def processor(logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor
