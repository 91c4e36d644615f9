"""Registry API router composition for tenancy creation, reads and finalization."""
# pylint: disable=duplicate-code

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from rental_lifecycle.config import AppSettings
from rental_lifecycle.domain import LifecycleError
from rental_lifecycle.lifecycle import RegistryLifecyclePort

from .schemas import RegistryCreateRequest
from .serialization import api_lifecycle_error_response, api_serialize_registry_view


def api_create_registries_router(
    settings: AppSettings,
    registry_manager: RegistryLifecyclePort,
) -> APIRouter:
    """Create router exposing tenancy registry endpoints.

    Args:
        settings: Runtime settings used for pagination defaults.
        registry_manager: Lifecycle-layer registry service.

    Returns:
        APIRouter: Router exposing `/registries` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if registry_manager is None:
        raise ValueError("registry_manager must not be None")

    router = APIRouter(prefix="/registries", tags=["registries"])

    @router.post("")
    def api_registry_create(request: RegistryCreateRequest) -> JSONResponse:
        """Create the active registry for an accepted application.

        Args:
            request: Registry creation payload.

        Returns:
            JSONResponse: 201 with the created registry, or the error envelope.
        """

        try:
            view = registry_manager.lifecycle_registry_create(
                application_id=request.application_id,
                start_date=request.start_date,
                end_date=request.end_date,
                monthly_amount=request.monthly_amount,
            )
        except LifecycleError as error:
            return api_lifecycle_error_response(error)
        return JSONResponse(content=api_serialize_registry_view(view), status_code=status.HTTP_201_CREATED)

    @router.get("")
    def api_registry_list(
        include_details: bool = Query(default=False),
        limit: int = Query(default=settings.api_default_limit, ge=1),
        offset: int = Query(default=0, ge=0),
    ) -> JSONResponse:
        applied_limit = min(limit, settings.api_max_limit)
        views = registry_manager.lifecycle_registry_list_all(
            with_details=include_details,
            limit=applied_limit,
            offset=offset,
        )
        payload = {
            "items": [api_serialize_registry_view(view) for view in views],
            "page": {
                "limit": limit,
                "applied_limit": applied_limit,
                "offset": offset,
                "returned": len(views),
            },
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/application/{application_id}")
    def api_registry_list_by_application(
        application_id: UUID,
        include_details: bool = Query(default=False),
    ) -> JSONResponse:
        views = registry_manager.lifecycle_registry_list_by_application(application_id, with_details=include_details)
        payload = {"items": [api_serialize_registry_view(view) for view in views]}
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/{registry_id}")
    def api_registry_detail(
        registry_id: UUID,
        include_details: bool = Query(default=True),
    ) -> JSONResponse:
        try:
            view = registry_manager.lifecycle_registry_get_by_id(registry_id, with_details=include_details)
        except LifecycleError as error:
            return api_lifecycle_error_response(error)
        return JSONResponse(content=api_serialize_registry_view(view), status_code=status.HTTP_200_OK)

    @router.patch("/{registry_id}/finalize")
    def api_registry_finalize(registry_id: UUID) -> JSONResponse:
        """Deactivate one registry.

        Args:
            registry_id: Registry identifier.

        Returns:
            JSONResponse: Finalized registry, or the error envelope.
        """

        try:
            view = registry_manager.lifecycle_registry_finalize(registry_id)
        except LifecycleError as error:
            return api_lifecycle_error_response(error)
        return JSONResponse(content=api_serialize_registry_view(view), status_code=status.HTTP_200_OK)

    return router
