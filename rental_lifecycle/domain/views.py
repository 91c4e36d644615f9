"""Read-side views that separate the primary entity from best-effort enrichment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .models import ApplicationRecord, PropertySummary, RegistryRecord, UserSummary

ENRICHMENT_COMPLETE: Final[str] = "complete"
ENRICHMENT_DEGRADED: Final[str] = "degraded"
ENRICHMENT_SKIPPED: Final[str] = "skipped"


@dataclass(frozen=True)
class EnrichmentOutcome:
    """Outcome of attaching display data from external collaborators.

    Attributes:
        status: `complete`, `degraded` or `skipped`.
        issues: Stable issue markers for each missing optional field.
    """

    status: str
    issues: tuple[str, ...] = ()

    def enrichment_is_degraded(self) -> bool:
        """Return whether at least one optional field could not be attached."""

        return self.status == ENRICHMENT_DEGRADED


@dataclass(frozen=True)
class ApplicationView:
    """Application plus optional user and property display data.

    Attributes:
        application: Primary application record.
        user: Optional user summary.
        property: Optional property summary.
        enrichment: Enrichment outcome for the optional fields.
    """

    application: ApplicationRecord
    user: UserSummary | None
    property: PropertySummary | None
    enrichment: EnrichmentOutcome


@dataclass(frozen=True)
class RegistryView:
    """Registry plus optional linked application view.

    Attributes:
        registry: Primary registry record.
        application: Optional linked application view.
        enrichment: Enrichment outcome for the optional fields.
    """

    registry: RegistryRecord
    application: ApplicationView | None
    enrichment: EnrichmentOutcome


def domain_build_enrichment_outcome(requested: bool, issues: list[str]) -> EnrichmentOutcome:
    """Build one enrichment outcome from collected issue markers.

    Args:
        requested: Whether the caller asked for enrichment.
        issues: Issue markers recorded while enriching.

    Returns:
        EnrichmentOutcome: `skipped` when not requested, otherwise `complete` or `degraded`.
    """

    if not requested:
        return EnrichmentOutcome(status=ENRICHMENT_SKIPPED)
    if issues:
        return EnrichmentOutcome(status=ENRICHMENT_DEGRADED, issues=tuple(issues))
    return EnrichmentOutcome(status=ENRICHMENT_COMPLETE)
