"""FastAPI application factory for the rental lifecycle service."""

from fastapi import FastAPI

from rental_lifecycle.config import AppSettings
from rental_lifecycle.db import DatabaseHealthPort
from rental_lifecycle.lifecycle import ApplicationLifecyclePort, RegistryLifecyclePort

from .routers import api_create_applications_router, api_create_health_router, api_create_registries_router


def create_api_application(
    settings: AppSettings,
    db_health_service: DatabaseHealthPort,
    application_manager: ApplicationLifecyclePort,
    registry_manager: RegistryLifecyclePort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        db_health_service: Storage health service used by the health endpoint.
        application_manager: Lifecycle service for rental applications.
        registry_manager: Lifecycle service for tenancy registries.

    Returns:
        FastAPI: Framework application with all lifecycle routers mounted.
    """
    application = FastAPI(title="Rental Lifecycle")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        return {
            "service": "rental-lifecycle",
            "status": "foundation-ready",
            "environment": settings.environment_name,
            "storage_backend": settings.storage_backend,
        }

    application.include_router(api_create_health_router(db_health_service=db_health_service))
    application.include_router(
        api_create_applications_router(settings=settings, application_manager=application_manager)
    )
    application.include_router(api_create_registries_router(settings=settings, registry_manager=registry_manager))

    return application
