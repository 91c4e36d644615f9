"""Application bootstrap wiring for startup validation and dependency assembly."""

from dataclasses import dataclass

import structlog
from fastapi import FastAPI

from rental_lifecycle.adapters import HttpDocumentLookupAdapter, HttpIdentityLookupAdapter, HttpPropertyLookupAdapter
from rental_lifecycle.api import create_api_application
from rental_lifecycle.config import AppSettings, config_configure_logging, config_load_settings
from rental_lifecycle.db import (
    ApplicationRepositoryPort,
    DatabaseHealthPort,
    InMemoryApplicationRepository,
    InMemoryDatabaseHealthService,
    InMemoryRegistryRepository,
    RegistryRepositoryPort,
    SQLAlchemyApplicationRepository,
    SQLAlchemyDatabaseHealthService,
    SQLAlchemyRegistryRepository,
    db_create_engine,
)
from rental_lifecycle.lifecycle import (
    ApplicationLifecycleManager,
    ApplicationPolicy,
    ApplicationViewEnricher,
    RegistryLifecycleManager,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StorageServices:
    """Storage-layer services selected by `storage_backend`."""

    db_health_service: DatabaseHealthPort
    application_repository: ApplicationRepositoryPort
    registry_repository: RegistryRepositoryPort


def bootstrap_create_storage(settings: AppSettings) -> StorageServices:
    """Build health and repository services for the configured backend.

    Args:
        settings: Validated runtime settings.

    Returns:
        StorageServices: Health, application and registry persistence services.
    """

    if settings.storage_backend == "memory":
        return StorageServices(
            db_health_service=InMemoryDatabaseHealthService(),
            application_repository=InMemoryApplicationRepository(),
            registry_repository=InMemoryRegistryRepository(),
        )

    engine = db_create_engine(
        database_url=settings.database_url,
        statement_timeout_ms=settings.database_statement_timeout_ms,
    )
    return StorageServices(
        db_health_service=SQLAlchemyDatabaseHealthService(engine=engine),
        application_repository=SQLAlchemyApplicationRepository(engine=engine),
        registry_repository=SQLAlchemyRegistryRepository(engine=engine),
    )


def bootstrap_create_managers(
    settings: AppSettings,
    storage: StorageServices,
) -> tuple[ApplicationLifecycleManager, RegistryLifecycleManager]:
    """Wire collaborator clients and lifecycle managers.

    Args:
        settings: Validated runtime settings.
        storage: Storage services for the configured backend.

    Returns:
        tuple[ApplicationLifecycleManager, RegistryLifecycleManager]: Application and registry managers.
    """

    identity_lookup = HttpIdentityLookupAdapter(
        base_url=settings.identity_service_url,
        timeout_seconds=settings.collaborator_timeout_seconds,
    )
    property_lookup = HttpPropertyLookupAdapter(
        base_url=settings.property_service_url,
        timeout_seconds=settings.collaborator_timeout_seconds,
    )
    document_lookup = None
    if settings.document_check_enabled:
        document_lookup = HttpDocumentLookupAdapter(
            base_url=settings.document_service_url,
            timeout_seconds=settings.collaborator_timeout_seconds,
        )

    enricher = ApplicationViewEnricher(identity_lookup=identity_lookup, property_lookup=property_lookup)
    application_manager = ApplicationLifecycleManager(
        application_repository=storage.application_repository,
        identity_lookup=identity_lookup,
        property_lookup=property_lookup,
        application_enricher=enricher,
        policy=ApplicationPolicy(
            max_pending_per_user=settings.application_max_pending_per_user,
            allowed_roles=settings.config_allowed_roles(),
            require_approved_documents=settings.document_check_enabled,
        ),
        document_lookup=document_lookup,
    )
    registry_manager = RegistryLifecycleManager(
        registry_repository=storage.registry_repository,
        application_repository=storage.application_repository,
        application_enricher=enricher,
    )
    return application_manager, registry_manager


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    config_configure_logging(log_level=resolved_settings.log_level, log_format=resolved_settings.log_format)

    storage = bootstrap_create_storage(resolved_settings)
    application_manager, registry_manager = bootstrap_create_managers(resolved_settings, storage)
    logger.info(
        "application_bootstrapped",
        environment=resolved_settings.environment_name,
        storage_backend=resolved_settings.storage_backend,
        storage_target=storage.db_health_service.db_connection_label(),
        document_check_enabled=resolved_settings.document_check_enabled,
    )
    return create_api_application(
        settings=resolved_settings,
        db_health_service=storage.db_health_service,
        application_manager=application_manager,
        registry_manager=registry_manager,
    )
