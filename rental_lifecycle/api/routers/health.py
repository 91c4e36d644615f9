"""Health endpoint router reporting process and storage reachability."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from rental_lifecycle.db import DatabaseHealthPort


def api_create_health_router(db_health_service: DatabaseHealthPort) -> APIRouter:
    """Create health-check router backed by the storage health service.

    Args:
        db_health_service: DB-layer health service interface.

    Returns:
        APIRouter: Router exposing `/health`.

    Raises:
        ValueError: Raised when db_health_service is invalid.
    """

    if db_health_service is None:
        raise ValueError("db_health_service must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        target = db_health_service.db_connection_label()
        try:
            storage_health = db_health_service.db_check_health()
        except ConnectionError as error:
            payload = {
                "status": "degraded",
                "app": "up",
                "storage": "down",
                "detail": str(error),
                "target": target,
            }
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

        payload = {
            "status": "ok",
            "app": "up",
            "storage": storage_health.status,
            "detail": storage_health.detail,
            "target": target,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
