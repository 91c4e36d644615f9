"""Application status vocabulary and explicit transition table."""

from __future__ import annotations

from typing import Final

from .errors import INVALID_STATUS, LifecycleValidationError

APPLICATION_STATUS_PENDING: Final[str] = "PENDING"
APPLICATION_STATUS_ACCEPTED: Final[str] = "ACCEPTED"
APPLICATION_STATUS_REJECTED: Final[str] = "REJECTED"

APPLICATION_STATUSES: Final[frozenset[str]] = frozenset(
    {APPLICATION_STATUS_PENDING, APPLICATION_STATUS_ACCEPTED, APPLICATION_STATUS_REJECTED}
)

# ACCEPTED and REJECTED are terminal.
APPLICATION_STATUS_TRANSITIONS: Final[dict[str, frozenset[str]]] = {
    APPLICATION_STATUS_PENDING: frozenset({APPLICATION_STATUS_ACCEPTED, APPLICATION_STATUS_REJECTED}),
    APPLICATION_STATUS_ACCEPTED: frozenset(),
    APPLICATION_STATUS_REJECTED: frozenset(),
}


def domain_normalize_application_status(status: str) -> str:
    """Normalize a caller-provided status and reject unknown values.

    Args:
        status: Candidate status text in any letter case.

    Returns:
        str: Upper-case status from the closed status set.

    Raises:
        LifecycleValidationError: Raised when status is blank or unknown.
    """

    normalized_status = (status or "").strip().upper()
    if normalized_status not in APPLICATION_STATUSES:
        raise LifecycleValidationError(f"invalid application status: {status}", error_code=INVALID_STATUS)
    return normalized_status


def domain_application_transition_allowed(current_status: str, target_status: str) -> bool:
    """Return whether the transition table permits `current_status -> target_status`."""

    return target_status in APPLICATION_STATUS_TRANSITIONS.get(current_status, frozenset())
