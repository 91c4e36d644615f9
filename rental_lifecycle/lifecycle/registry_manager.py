"""Lifecycle-layer service for tenancy registry creation and finalization."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal
from typing import Final
from uuid import UUID

import structlog

from rental_lifecycle.db import ApplicationRepositoryPort, RegistryAlreadyActiveError, RegistryRepositoryPort
from rental_lifecycle.domain import (
    APPLICATION_STATUS_ACCEPTED,
    ApplicationView,
    LifecycleNotFoundError,
    LifecycleValidationError,
    RegistryRecord,
    RegistryView,
    domain_build_enrichment_outcome,
)
from rental_lifecycle.domain.errors import (
    ACTIVE_REGISTRY_EXISTS,
    APPLICATION_NOT_ACCEPTED,
    APPLICATION_NOT_FOUND,
    INVALID_AMOUNT,
    INVALID_DATE_RANGE,
    REGISTRY_ALREADY_INACTIVE,
    REGISTRY_NOT_FOUND,
)

from .application_manager import lifecycle_utc_now
from .enrichment import ApplicationViewEnricher
from .interfaces import RegistryLifecyclePort

logger = structlog.get_logger(__name__)

ISSUE_APPLICATION_UNAVAILABLE: Final[str] = "application_unavailable"
ISSUE_APPLICATION_NOT_FOUND: Final[str] = "application_not_found"


class RegistryLifecycleManager(RegistryLifecyclePort):
    """Owns the accepted-application to registry workflow.

    The active-registry check here gives callers a precise error; the store's
    atomic create is what actually guarantees one active registry per
    application under concurrent requests.
    """

    def __init__(
        self,
        registry_repository: RegistryRepositoryPort,
        application_repository: ApplicationRepositoryPort,
        application_enricher: ApplicationViewEnricher,
        clock: Callable[[], datetime] = lifecycle_utc_now,
    ):
        """Initialize registry manager dependencies.

        Args:
            registry_repository: DB-layer registry persistence service.
            application_repository: DB-layer application persistence service.
            application_enricher: Best-effort application view builder.
            clock: UTC timestamp source; its date is used as the finalize end date.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies are missing.
        """

        if registry_repository is None:
            raise ValueError("registry_repository must not be None")
        if application_repository is None:
            raise ValueError("application_repository must not be None")
        if application_enricher is None:
            raise ValueError("application_enricher must not be None")

        self._registry_repository = registry_repository
        self._application_repository = application_repository
        self._application_enricher = application_enricher
        self._clock = clock

    def lifecycle_registry_create(
        self,
        application_id: UUID,
        start_date: date,
        end_date: date | None,
        monthly_amount: Decimal,
    ) -> RegistryView:
        """Create the active registry for an accepted application.

        Args:
            application_id: Source application identifier.
            start_date: Tenancy start date.
            end_date: Optional tenancy end date.
            monthly_amount: Monthly rent amount, strictly positive.

        Returns:
            RegistryView: Created registry with the linked application view.

        Raises:
            LifecycleNotFoundError: Raised when the application does not exist.
            LifecycleValidationError: Raised when status, uniqueness, date or amount rules fail.
            RuntimeError: Raised when persistence fails.
        """

        application = self._application_repository.db_application_get_by_id(application_id)
        if application is None:
            raise LifecycleNotFoundError(f"application {application_id} not found", APPLICATION_NOT_FOUND)

        if application.status != APPLICATION_STATUS_ACCEPTED:
            raise LifecycleValidationError(
                f"application must be {APPLICATION_STATUS_ACCEPTED} to create a registry; current status is {application.status}",
                APPLICATION_NOT_ACCEPTED,
            )

        existing = self._registry_repository.db_registry_list_by_application(application_id)
        if any(registry.active for registry in existing):
            raise LifecycleValidationError(
                "an active registry already exists for this application",
                ACTIVE_REGISTRY_EXISTS,
            )

        if end_date is not None and end_date < start_date:
            raise LifecycleValidationError(
                f"end_date {end_date.isoformat()} is before start_date {start_date.isoformat()}",
                INVALID_DATE_RANGE,
            )
        if monthly_amount <= 0:
            raise LifecycleValidationError("monthly_amount must be greater than zero", INVALID_AMOUNT)

        try:
            record = self._registry_repository.db_registry_create_active(
                application_id=application_id,
                start_date=start_date,
                end_date=end_date,
                monthly_amount=monthly_amount,
                created_at_utc=self._clock(),
            )
        except RegistryAlreadyActiveError as error:
            logger.info("registry_create_conflict", application_id=str(application_id))
            raise LifecycleValidationError(str(error), ACTIVE_REGISTRY_EXISTS) from error

        logger.info(
            "registry_created",
            registry_id=str(record.registry_id),
            application_id=str(application_id),
        )
        return self._lifecycle_build_view(record, with_details=True)

    def lifecycle_registry_finalize(self, registry_id: UUID) -> RegistryView:
        """Deactivate an active registry and stamp today's date when it has no end date.

        Args:
            registry_id: Registry identifier.

        Returns:
            RegistryView: Finalized registry with the linked application view.

        Raises:
            LifecycleNotFoundError: Raised when the registry does not exist.
            LifecycleValidationError: Raised when the registry is already inactive.
        """

        current = self._lifecycle_require_registry(registry_id)
        if not current.active:
            raise LifecycleValidationError(f"registry {registry_id} is already inactive", REGISTRY_ALREADY_INACTIVE)

        updated = self._registry_repository.db_registry_finalize(registry_id, end_date=self._clock().date())
        if updated is None:
            raise LifecycleValidationError(f"registry {registry_id} is already inactive", REGISTRY_ALREADY_INACTIVE)

        logger.info(
            "registry_finalized",
            registry_id=str(registry_id),
            end_date=updated.end_date.isoformat() if updated.end_date else None,
        )
        return self._lifecycle_build_view(updated, with_details=True)

    def lifecycle_registry_get_by_id(self, registry_id: UUID, with_details: bool = True) -> RegistryView:
        return self._lifecycle_build_view(self._lifecycle_require_registry(registry_id), with_details)

    def lifecycle_registry_list_by_application(
        self,
        application_id: UUID,
        with_details: bool = False,
    ) -> list[RegistryView]:
        records = self._registry_repository.db_registry_list_by_application(application_id)
        return [self._lifecycle_build_view(record, with_details) for record in records]

    def lifecycle_registry_list_all(self, with_details: bool, limit: int, offset: int) -> list[RegistryView]:
        records = self._registry_repository.db_registry_list(limit=limit, offset=offset)
        return [self._lifecycle_build_view(record, with_details) for record in records]

    def _lifecycle_require_registry(self, registry_id: UUID) -> RegistryRecord:
        record = self._registry_repository.db_registry_get_by_id(registry_id)
        if record is None:
            raise LifecycleNotFoundError(f"registry {registry_id} not found", REGISTRY_NOT_FOUND)
        return record

    def _lifecycle_build_view(self, record: RegistryRecord, with_details: bool) -> RegistryView:
        """Attach the linked application view, degrading on any lookup failure."""

        if not with_details:
            return RegistryView(
                registry=record,
                application=None,
                enrichment=domain_build_enrichment_outcome(requested=False, issues=[]),
            )

        issues: list[str] = []
        application_view: ApplicationView | None = None
        try:
            application = self._application_repository.db_application_get_by_id(record.application_id)
        except RuntimeError as error:
            logger.warning(
                "enrichment_degraded",
                registry_id=str(record.registry_id),
                issue=ISSUE_APPLICATION_UNAVAILABLE,
                error=str(error),
            )
            issues.append(ISSUE_APPLICATION_UNAVAILABLE)
        else:
            if application is None:
                logger.warning(
                    "enrichment_degraded",
                    registry_id=str(record.registry_id),
                    issue=ISSUE_APPLICATION_NOT_FOUND,
                    application_id=str(record.application_id),
                )
                issues.append(ISSUE_APPLICATION_NOT_FOUND)
            else:
                application_view = self._application_enricher.lifecycle_enrich_application(
                    application,
                    with_details=True,
                )
                issues.extend(application_view.enrichment.issues)

        return RegistryView(
            registry=record,
            application=application_view,
            enrichment=domain_build_enrichment_outcome(requested=True, issues=issues),
        )
