"""Best-effort attachment of collaborator display data to application records."""

from __future__ import annotations

from typing import Final

import structlog

from rental_lifecycle.adapters import CollaboratorError, IdentityLookupPort, PropertyLookupPort
from rental_lifecycle.domain import (
    ApplicationRecord,
    ApplicationView,
    PropertySummary,
    UserSummary,
    domain_build_enrichment_outcome,
)

logger = structlog.get_logger(__name__)

ISSUE_USER_UNAVAILABLE: Final[str] = "user_unavailable"
ISSUE_USER_NOT_FOUND: Final[str] = "user_not_found"
ISSUE_PROPERTY_UNAVAILABLE: Final[str] = "property_unavailable"
ISSUE_PROPERTY_NOT_FOUND: Final[str] = "property_not_found"


class ApplicationViewEnricher:
    """Builds application views, degrading instead of failing on collaborator errors."""

    def __init__(self, identity_lookup: IdentityLookupPort, property_lookup: PropertyLookupPort):
        """Initialize enricher dependencies.

        Args:
            identity_lookup: Identity collaborator adapter.
            property_lookup: Property collaborator adapter.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies are missing.
        """

        if identity_lookup is None:
            raise ValueError("identity_lookup must not be None")
        if property_lookup is None:
            raise ValueError("property_lookup must not be None")
        self._identity_lookup = identity_lookup
        self._property_lookup = property_lookup

    def lifecycle_enrich_application(self, record: ApplicationRecord, with_details: bool) -> ApplicationView:
        """Attach user and property summaries when requested.

        Summaries are fetched independently, so one collaborator failing does
        not prevent the other field from being populated.

        Args:
            record: Persisted application.
            with_details: Whether display data should be fetched at all.

        Returns:
            ApplicationView: View whose enrichment block lists every missing field.
        """

        if not with_details:
            return ApplicationView(
                application=record,
                user=None,
                property=None,
                enrichment=domain_build_enrichment_outcome(requested=False, issues=[]),
            )

        issues: list[str] = []
        user = self._lifecycle_fetch_user(record, issues)
        property_summary = self._lifecycle_fetch_property(record, issues)
        return ApplicationView(
            application=record,
            user=user,
            property=property_summary,
            enrichment=domain_build_enrichment_outcome(requested=True, issues=issues),
        )

    def _lifecycle_fetch_user(self, record: ApplicationRecord, issues: list[str]) -> UserSummary | None:
        try:
            summary = self._identity_lookup.adapter_fetch_user_summary(record.user_id)
        except CollaboratorError as error:
            logger.warning(
                "enrichment_degraded",
                application_id=str(record.application_id),
                collaborator=error.collaborator,
                issue=ISSUE_USER_UNAVAILABLE,
                error=str(error),
            )
            issues.append(ISSUE_USER_UNAVAILABLE)
            return None

        if summary is None:
            logger.warning(
                "enrichment_degraded",
                application_id=str(record.application_id),
                issue=ISSUE_USER_NOT_FOUND,
                user_id=record.user_id,
            )
            issues.append(ISSUE_USER_NOT_FOUND)
        return summary

    def _lifecycle_fetch_property(self, record: ApplicationRecord, issues: list[str]) -> PropertySummary | None:
        try:
            summary = self._property_lookup.adapter_fetch_property_summary(record.property_id)
        except CollaboratorError as error:
            logger.warning(
                "enrichment_degraded",
                application_id=str(record.application_id),
                collaborator=error.collaborator,
                issue=ISSUE_PROPERTY_UNAVAILABLE,
                error=str(error),
            )
            issues.append(ISSUE_PROPERTY_UNAVAILABLE)
            return None

        if summary is None:
            logger.warning(
                "enrichment_degraded",
                application_id=str(record.application_id),
                issue=ISSUE_PROPERTY_NOT_FOUND,
                property_id=record.property_id,
            )
            issues.append(ISSUE_PROPERTY_NOT_FOUND)
        return summary
