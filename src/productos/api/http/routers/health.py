"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.productos.api.http.app_data import ApplicationDependencies
from src.productos.api.http.deps import get_app_dependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health() -> dict[str, str]:
    """Liveness probe: 200 OK as long as the process is running.

    It does not check dependencies.
    """
    return {"status": "healthy", "service": "productos"}


@router.get("/ready", response_model=None)
def readiness(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the storage backend answers, 503 otherwise."""
    backend = app_deps.storage_service.backend

    try:
        storage_healthy = app_deps.storage_service.health_check()
        storage_check: dict[str, Any] = {
            "status": "healthy" if storage_healthy else "unhealthy",
            "type": backend,
        }
    except Exception as e:
        storage_healthy = False
        storage_check = {"status": "unhealthy", "type": backend, "error": str(e)}

    body = {
        "status": "ready" if storage_healthy else "not_ready",
        "checks": {"storage": storage_check},
    }
    if not storage_healthy:
        return JSONResponse(status_code=503, content=body)
    return body
