"""Health check endpoint factory.

``/health`` never calls ViaCEP, WeatherAPI or the other hop: it reports
the upstreams a service is configured for and runs local checks only.
"""

from collections.abc import Callable, Mapping

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

logger = structlog.get_logger()

HealthCheck = Callable[[], bool]


def _run_checks(checks: Mapping[str, HealthCheck]) -> dict[str, str]:
    results: dict[str, str] = {}
    for name, check in checks.items():
        try:
            ok = bool(check())
        except Exception:
            logger.warning("health_check_failed", check=name, exc_info=True)
            ok = False
        results[name] = "ok" if ok else "failing"
    return results


def create_health_router(
    service_name: str,
    version: str,
    upstreams: Mapping[str, str] | None = None,
    checks: Mapping[str, HealthCheck] | None = None,
) -> APIRouter:
    """Return a router with a ``GET /health`` endpoint.

    Args:
        service_name: Service identifier, the same name its spans carry.
        version: Package version.
        upstreams: Upstream name to configured base URL, echoed as-is.
        checks: Local checks; any ``False`` or exception answers 503.
    """
    router = APIRouter()
    upstreams = dict(upstreams or {})
    checks = dict(checks or {})

    @router.get("/health")
    async def health() -> JSONResponse:
        results = _run_checks(checks)
        healthy = all(result == "ok" for result in results.values())
        return JSONResponse(
            status_code=200 if healthy else 503,
            content={
                "status": "healthy" if healthy else "unhealthy",
                "service": service_name,
                "version": version,
                "upstreams": upstreams,
                "checks": results,
            },
        )

    return router
