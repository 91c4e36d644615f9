"""Application API router composition for creation, reads and status decisions."""
# pylint: disable=duplicate-code

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from rental_lifecycle.config import AppSettings
from rental_lifecycle.domain import LifecycleError
from rental_lifecycle.lifecycle import ApplicationLifecyclePort

from .schemas import ApplicationCreateRequest
from .serialization import api_lifecycle_error_response, api_serialize_application_view


def api_create_applications_router(
    settings: AppSettings,
    application_manager: ApplicationLifecyclePort,
) -> APIRouter:
    """Create router exposing rental application endpoints.

    Args:
        settings: Runtime settings used for pagination defaults.
        application_manager: Lifecycle-layer application service.

    Returns:
        APIRouter: Router exposing `/applications` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if application_manager is None:
        raise ValueError("application_manager must not be None")

    router = APIRouter(prefix="/applications", tags=["applications"])

    @router.post("")
    def api_application_create(request: ApplicationCreateRequest) -> JSONResponse:
        """Validate and create one PENDING application.

        Args:
            request: Applicant and property identifiers.

        Returns:
            JSONResponse: 201 with the created application, or the error envelope.
        """

        try:
            view = application_manager.lifecycle_application_create(
                user_id=request.user_id,
                property_id=request.property_id,
            )
        except LifecycleError as error:
            return api_lifecycle_error_response(error)
        return JSONResponse(content=api_serialize_application_view(view), status_code=status.HTTP_201_CREATED)

    @router.get("")
    def api_application_list(
        include_details: bool = Query(default=False),
        limit: int = Query(default=settings.api_default_limit, ge=1),
        offset: int = Query(default=0, ge=0),
    ) -> JSONResponse:
        """List applications newest first.

        Args:
            include_details: Whether user and property summaries are attached.
            limit: Max rows to return.
            offset: Rows to skip.

        Returns:
            JSONResponse: Application list envelope payload.
        """

        applied_limit = min(limit, settings.api_max_limit)
        views = application_manager.lifecycle_application_list_all(
            with_details=include_details,
            limit=applied_limit,
            offset=offset,
        )
        payload = {
            "items": [api_serialize_application_view(view) for view in views],
            "page": {
                "limit": limit,
                "applied_limit": applied_limit,
                "offset": offset,
                "returned": len(views),
            },
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/user/{user_id}")
    def api_application_list_by_user(
        user_id: int,
        include_details: bool = Query(default=False),
    ) -> JSONResponse:
        views = application_manager.lifecycle_application_list_by_user(user_id, with_details=include_details)
        payload = {"items": [api_serialize_application_view(view) for view in views]}
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/property/{property_id}")
    def api_application_list_by_property(
        property_id: int,
        include_details: bool = Query(default=False),
    ) -> JSONResponse:
        views = application_manager.lifecycle_application_list_by_property(property_id, with_details=include_details)
        payload = {"items": [api_serialize_application_view(view) for view in views]}
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/{application_id}")
    def api_application_detail(
        application_id: UUID,
        include_details: bool = Query(default=True),
    ) -> JSONResponse:
        """Return one application.

        Args:
            application_id: Application identifier.
            include_details: Whether user and property summaries are attached.

        Returns:
            JSONResponse: Application payload, or 404 envelope when absent.
        """

        try:
            view = application_manager.lifecycle_application_get_by_id(application_id, with_details=include_details)
        except LifecycleError as error:
            return api_lifecycle_error_response(error)
        return JSONResponse(content=api_serialize_application_view(view), status_code=status.HTTP_200_OK)

    @router.patch("/{application_id}/status")
    def api_application_transition_status(
        application_id: UUID,
        new_status: str = Query(alias="status", min_length=1),
    ) -> JSONResponse:
        """Apply one status transition.

        Args:
            application_id: Application identifier.
            new_status: Target status from the `status` query parameter.

        Returns:
            JSONResponse: Updated application, or the error envelope.
        """

        try:
            view = application_manager.lifecycle_application_transition_status(application_id, new_status)
        except LifecycleError as error:
            return api_lifecycle_error_response(error)
        return JSONResponse(content=api_serialize_application_view(view), status_code=status.HTTP_200_OK)

    return router
