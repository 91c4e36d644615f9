"""Domain models used across application layer boundaries."""

from .errors import LifecycleError, LifecycleNotFoundError, LifecycleValidationError
from .models import ApplicationRecord, HealthStatus, PropertySummary, RegistryRecord, UserSummary
from .status import (
	APPLICATION_STATUS_ACCEPTED,
	APPLICATION_STATUS_PENDING,
	APPLICATION_STATUS_REJECTED,
	APPLICATION_STATUS_TRANSITIONS,
	APPLICATION_STATUSES,
	domain_application_transition_allowed,
	domain_normalize_application_status,
)
from .views import (
	ENRICHMENT_COMPLETE,
	ENRICHMENT_DEGRADED,
	ENRICHMENT_SKIPPED,
	ApplicationView,
	EnrichmentOutcome,
	RegistryView,
	domain_build_enrichment_outcome,
)

__all__ = [
	"APPLICATION_STATUS_ACCEPTED",
	"APPLICATION_STATUS_PENDING",
	"APPLICATION_STATUS_REJECTED",
	"APPLICATION_STATUS_TRANSITIONS",
	"APPLICATION_STATUSES",
	"ENRICHMENT_COMPLETE",
	"ENRICHMENT_DEGRADED",
	"ENRICHMENT_SKIPPED",
	"ApplicationRecord",
	"ApplicationView",
	"EnrichmentOutcome",
	"HealthStatus",
	"LifecycleError",
	"LifecycleNotFoundError",
	"LifecycleValidationError",
	"PropertySummary",
	"RegistryRecord",
	"RegistryView",
	"UserSummary",
	"domain_application_transition_allowed",
	"domain_build_enrichment_outcome",
	"domain_normalize_application_status",
]
