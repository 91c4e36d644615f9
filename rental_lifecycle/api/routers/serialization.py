"""JSON serialization helpers shared by lifecycle routers."""

from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse

from rental_lifecycle.domain import (
    ApplicationRecord,
    ApplicationView,
    EnrichmentOutcome,
    LifecycleError,
    LifecycleNotFoundError,
    PropertySummary,
    RegistryRecord,
    RegistryView,
    UserSummary,
)


def api_lifecycle_error_response(error: LifecycleError) -> JSONResponse:
    """Map one lifecycle failure to the error envelope.

    Args:
        error: Lifecycle failure raised by a manager.

    Returns:
        JSONResponse: 404 for missing local entities, 400 for every other business failure.
    """

    status_code = status.HTTP_404_NOT_FOUND if isinstance(error, LifecycleNotFoundError) else status.HTTP_400_BAD_REQUEST
    payload = {
        "status": "error",
        "code": error.error_code,
        "message": str(error),
    }
    return JSONResponse(content=payload, status_code=status_code)


def api_serialize_enrichment(enrichment: EnrichmentOutcome) -> dict[str, object]:
    return {"status": enrichment.status, "issues": list(enrichment.issues)}


def api_serialize_user_summary(user: UserSummary | None) -> dict[str, object] | None:
    if user is None:
        return None
    return {
        "user_id": user.user_id,
        "display_name": user.display_name,
        "email": user.email,
        "role": user.role,
    }


def api_serialize_property_summary(property_summary: PropertySummary | None) -> dict[str, object] | None:
    if property_summary is None:
        return None
    return {
        "property_id": property_summary.property_id,
        "address": property_summary.address,
        "monthly_price": None if property_summary.monthly_price is None else str(property_summary.monthly_price),
        "title": property_summary.title,
        "currency": property_summary.currency,
        "available": property_summary.available,
    }


def api_serialize_application_record(record: ApplicationRecord) -> dict[str, object]:
    return {
        "application_id": str(record.application_id),
        "user_id": record.user_id,
        "property_id": record.property_id,
        "status": record.status,
        "created_at_utc": record.created_at_utc.isoformat(),
    }


def api_serialize_application_view(view: ApplicationView) -> dict[str, object]:
    """Serialize one application view to JSON payload.

    Args:
        view: Application view with optional display data.

    Returns:
        dict[str, object]: Application fields plus `user`, `property` and `enrichment` blocks.
    """

    payload = api_serialize_application_record(view.application)
    payload["user"] = api_serialize_user_summary(view.user)
    payload["property"] = api_serialize_property_summary(view.property)
    payload["enrichment"] = api_serialize_enrichment(view.enrichment)
    return payload


def api_serialize_registry_record(record: RegistryRecord) -> dict[str, object]:
    return {
        "registry_id": str(record.registry_id),
        "application_id": str(record.application_id),
        "start_date": record.start_date.isoformat(),
        "end_date": None if record.end_date is None else record.end_date.isoformat(),
        "monthly_amount": str(record.monthly_amount),
        "active": record.active,
        "created_at_utc": record.created_at_utc.isoformat(),
    }


def api_serialize_registry_view(view: RegistryView) -> dict[str, object]:
    """Serialize one registry view to JSON payload.

    Args:
        view: Registry view with optional linked application.

    Returns:
        dict[str, object]: Registry fields plus `application` and `enrichment` blocks.
    """

    payload = api_serialize_registry_record(view.registry)
    payload["application"] = None if view.application is None else api_serialize_application_view(view.application)
    payload["enrichment"] = api_serialize_enrichment(view.enrichment)
    return payload
