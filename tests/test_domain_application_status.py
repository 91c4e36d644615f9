"""Tests for application status normalization and the transition table."""

import pytest

from rental_lifecycle.domain import (
    APPLICATION_STATUS_ACCEPTED,
    APPLICATION_STATUS_PENDING,
    APPLICATION_STATUS_REJECTED,
    APPLICATION_STATUSES,
    LifecycleValidationError,
    domain_application_transition_allowed,
    domain_build_enrichment_outcome,
    domain_normalize_application_status,
)
from rental_lifecycle.domain.errors import INVALID_STATUS


@pytest.mark.parametrize("raw_status", ["accepted", " Accepted ", "ACCEPTED"])
def test_domain_normalize_application_status_upper_cases_known_values(raw_status: str) -> None:
    assert domain_normalize_application_status(raw_status) == APPLICATION_STATUS_ACCEPTED


@pytest.mark.parametrize("raw_status", ["", "   ", "CANCELLED", "approved"])
def test_domain_normalize_application_status_rejects_unknown_values(raw_status: str) -> None:
    with pytest.raises(LifecycleValidationError) as error_info:
        domain_normalize_application_status(raw_status)

    assert error_info.value.error_code == INVALID_STATUS


def test_domain_status_set_is_closed() -> None:
    assert APPLICATION_STATUSES == {"PENDING", "ACCEPTED", "REJECTED"}


@pytest.mark.parametrize(
    ("current_status", "target_status", "expected"),
    [
        (APPLICATION_STATUS_PENDING, APPLICATION_STATUS_ACCEPTED, True),
        (APPLICATION_STATUS_PENDING, APPLICATION_STATUS_REJECTED, True),
        (APPLICATION_STATUS_PENDING, APPLICATION_STATUS_PENDING, False),
        (APPLICATION_STATUS_ACCEPTED, APPLICATION_STATUS_PENDING, False),
        (APPLICATION_STATUS_ACCEPTED, APPLICATION_STATUS_REJECTED, False),
        (APPLICATION_STATUS_REJECTED, APPLICATION_STATUS_ACCEPTED, False),
        ("UNKNOWN", APPLICATION_STATUS_ACCEPTED, False),
    ],
)
def test_domain_application_transition_table(current_status: str, target_status: str, expected: bool) -> None:
    assert domain_application_transition_allowed(current_status, target_status) is expected


def test_domain_build_enrichment_outcome_distinguishes_skipped_complete_and_degraded() -> None:
    skipped = domain_build_enrichment_outcome(requested=False, issues=["ignored"])
    complete = domain_build_enrichment_outcome(requested=True, issues=[])
    degraded = domain_build_enrichment_outcome(requested=True, issues=["user_unavailable"])

    assert skipped.status == "skipped"
    assert skipped.issues == ()
    assert complete.status == "complete"
    assert not complete.enrichment_is_degraded()
    assert degraded.status == "degraded"
    assert degraded.issues == ("user_unavailable",)
    assert degraded.enrichment_is_degraded()
