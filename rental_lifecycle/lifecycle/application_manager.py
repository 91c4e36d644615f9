"""Lifecycle-layer service for rental application creation and status decisions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

import structlog

from rental_lifecycle.adapters import CollaboratorError, DocumentLookupPort, IdentityLookupPort, PropertyLookupPort
from rental_lifecycle.db import ApplicationRepositoryPort
from rental_lifecycle.domain import (
    APPLICATION_STATUS_PENDING,
    ApplicationRecord,
    ApplicationView,
    LifecycleNotFoundError,
    LifecycleValidationError,
    domain_application_transition_allowed,
    domain_normalize_application_status,
)
from rental_lifecycle.domain.errors import (
    APPLICATION_NOT_FOUND,
    COLLABORATOR_UNAVAILABLE,
    DOCUMENTS_NOT_APPROVED,
    DUPLICATE_PENDING_APPLICATION,
    INVALID_TRANSITION,
    PENDING_LIMIT_REACHED,
    PROPERTY_NOT_FOUND,
    PROPERTY_UNAVAILABLE,
    ROLE_NOT_ALLOWED,
    USER_NOT_FOUND,
)

from .enrichment import ApplicationViewEnricher
from .interfaces import ApplicationLifecyclePort

logger = structlog.get_logger(__name__)


def lifecycle_utc_now() -> datetime:
    """Return the current timezone-aware UTC timestamp."""

    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ApplicationPolicy:
    """Business rules applied before an application is persisted.

    Attributes:
        max_pending_per_user: Maximum PENDING applications one user may hold.
        allowed_roles: Roles permitted to apply; None disables the role check.
        require_approved_documents: Whether the document collaborator must approve the user.
    """

    max_pending_per_user: int = 3
    allowed_roles: frozenset[str] | None = None
    require_approved_documents: bool = False


class ApplicationLifecycleManager(ApplicationLifecyclePort):
    """Owns application validation, persistence and status transitions.

    Validation calls to collaborators fail closed: an unreachable identity,
    property or document service rejects the request and nothing is stored.
    """

    def __init__(
        self,
        application_repository: ApplicationRepositoryPort,
        identity_lookup: IdentityLookupPort,
        property_lookup: PropertyLookupPort,
        application_enricher: ApplicationViewEnricher,
        policy: ApplicationPolicy | None = None,
        document_lookup: DocumentLookupPort | None = None,
        clock: Callable[[], datetime] = lifecycle_utc_now,
    ):
        """Initialize application manager dependencies.

        Args:
            application_repository: DB-layer application persistence service.
            identity_lookup: Identity collaborator adapter.
            property_lookup: Property collaborator adapter.
            application_enricher: Best-effort view builder.
            policy: Creation policy; defaults to `ApplicationPolicy()`.
            document_lookup: Document collaborator adapter, required when documents are enforced.
            clock: UTC timestamp source.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or policy values are invalid.
        """

        if application_repository is None:
            raise ValueError("application_repository must not be None")
        if identity_lookup is None:
            raise ValueError("identity_lookup must not be None")
        if property_lookup is None:
            raise ValueError("property_lookup must not be None")
        if application_enricher is None:
            raise ValueError("application_enricher must not be None")

        resolved_policy = policy or ApplicationPolicy()
        if resolved_policy.max_pending_per_user < 1:
            raise ValueError("policy.max_pending_per_user must be >= 1")
        if resolved_policy.require_approved_documents and document_lookup is None:
            raise ValueError("document_lookup must not be None when approved documents are required")

        self._application_repository = application_repository
        self._identity_lookup = identity_lookup
        self._property_lookup = property_lookup
        self._application_enricher = application_enricher
        self._policy = resolved_policy
        self._document_lookup = document_lookup
        self._clock = clock

    def lifecycle_application_create(self, user_id: int, property_id: int) -> ApplicationView:
        """Validate a new application against collaborators and policy, then persist it.

        Args:
            user_id: External user identifier.
            property_id: External property identifier.

        Returns:
            ApplicationView: Created PENDING application, enriched best-effort.

        Raises:
            LifecycleValidationError: Raised when any precondition fails or a collaborator is unreachable.
            RuntimeError: Raised when persistence fails.
        """

        try:
            self._lifecycle_validate_new_application(user_id, property_id)
        except CollaboratorError as error:
            logger.warning(
                "application_validation_unavailable",
                user_id=user_id,
                property_id=property_id,
                collaborator=error.collaborator,
                error=str(error),
            )
            raise LifecycleValidationError(
                f"could not validate application: {error.collaborator} is unavailable",
                COLLABORATOR_UNAVAILABLE,
            ) from error
        except LifecycleValidationError as error:
            logger.info(
                "application_validation_failed",
                user_id=user_id,
                property_id=property_id,
                error_code=error.error_code,
            )
            raise

        record = self._application_repository.db_application_create(
            user_id=user_id,
            property_id=property_id,
            status=APPLICATION_STATUS_PENDING,
            created_at_utc=self._clock(),
        )
        logger.info(
            "application_created",
            application_id=str(record.application_id),
            user_id=user_id,
            property_id=property_id,
        )
        return self._application_enricher.lifecycle_enrich_application(record, with_details=True)

    def lifecycle_application_transition_status(self, application_id: UUID, new_status: str) -> ApplicationView:
        """Apply one allowed status transition.

        Args:
            application_id: Application identifier.
            new_status: Requested status, case-insensitive.

        Returns:
            ApplicationView: Updated application, enriched best-effort.

        Raises:
            LifecycleNotFoundError: Raised when the application does not exist.
            LifecycleValidationError: Raised for unknown statuses, disallowed transitions or a lost race.
        """

        current = self._lifecycle_require_application(application_id)
        target_status = domain_normalize_application_status(new_status)

        if not domain_application_transition_allowed(current.status, target_status):
            raise LifecycleValidationError(
                f"transition {current.status} -> {target_status} is not allowed",
                INVALID_TRANSITION,
            )

        updated = self._application_repository.db_application_update_status(
            application_id=application_id,
            expected_status=current.status,
            new_status=target_status,
        )
        if updated is None:
            raise LifecycleValidationError(
                f"application status changed concurrently; transition {current.status} -> {target_status} rejected",
                INVALID_TRANSITION,
            )

        logger.info(
            "application_status_changed",
            application_id=str(application_id),
            previous_status=current.status,
            status=updated.status,
        )
        return self._application_enricher.lifecycle_enrich_application(updated, with_details=True)

    def lifecycle_application_get_by_id(self, application_id: UUID, with_details: bool = True) -> ApplicationView:
        record = self._lifecycle_require_application(application_id)
        return self._application_enricher.lifecycle_enrich_application(record, with_details=with_details)

    def lifecycle_application_list_by_user(self, user_id: int, with_details: bool = False) -> list[ApplicationView]:
        records = self._application_repository.db_application_list_by_user(user_id)
        return [self._application_enricher.lifecycle_enrich_application(record, with_details) for record in records]

    def lifecycle_application_list_by_property(
        self,
        property_id: int,
        with_details: bool = False,
    ) -> list[ApplicationView]:
        records = self._application_repository.db_application_list_by_property(property_id)
        return [self._application_enricher.lifecycle_enrich_application(record, with_details) for record in records]

    def lifecycle_application_list_all(self, with_details: bool, limit: int, offset: int) -> list[ApplicationView]:
        records = self._application_repository.db_application_list(limit=limit, offset=offset)
        return [self._application_enricher.lifecycle_enrich_application(record, with_details) for record in records]

    def _lifecycle_require_application(self, application_id: UUID) -> ApplicationRecord:
        record = self._application_repository.db_application_get_by_id(application_id)
        if record is None:
            raise LifecycleNotFoundError(f"application {application_id} not found", APPLICATION_NOT_FOUND)
        return record

    def _lifecycle_validate_new_application(self, user_id: int, property_id: int) -> None:
        """Run creation checks in order, stopping at the first failure.

        Raises:
            LifecycleValidationError: Raised when a check fails.
            CollaboratorError: Raised when a collaborator cannot answer.
        """

        if not self._identity_lookup.adapter_user_exists(user_id):
            raise LifecycleValidationError(f"user {user_id} does not exist", USER_NOT_FOUND)

        if self._policy.allowed_roles is not None:
            user_summary = self._identity_lookup.adapter_fetch_user_summary(user_id)
            if user_summary is None:
                raise LifecycleValidationError(f"user {user_id} does not exist", USER_NOT_FOUND)
            if user_summary.role not in self._policy.allowed_roles:
                raise LifecycleValidationError(
                    f"role {user_summary.role} is not allowed to apply",
                    ROLE_NOT_ALLOWED,
                )

        pending = [
            record
            for record in self._application_repository.db_application_list_by_user(user_id)
            if record.status == APPLICATION_STATUS_PENDING
        ]
        if len(pending) >= self._policy.max_pending_per_user:
            raise LifecycleValidationError(
                f"user {user_id} already has {len(pending)} pending applications",
                PENDING_LIMIT_REACHED,
            )
        if any(record.property_id == property_id for record in pending):
            raise LifecycleValidationError(
                f"user {user_id} already has a pending application for property {property_id}",
                DUPLICATE_PENDING_APPLICATION,
            )

        if not self._property_lookup.adapter_property_exists(property_id):
            raise LifecycleValidationError(f"property {property_id} does not exist", PROPERTY_NOT_FOUND)
        if not self._property_lookup.adapter_property_is_available(property_id):
            raise LifecycleValidationError(f"property {property_id} is not available", PROPERTY_UNAVAILABLE)

        if self._policy.require_approved_documents and self._document_lookup is not None:
            if not self._document_lookup.adapter_user_has_approved_documents(user_id):
                raise LifecycleValidationError(
                    f"user {user_id} has no approved documents",
                    DOCUMENTS_NOT_APPROVED,
                )
