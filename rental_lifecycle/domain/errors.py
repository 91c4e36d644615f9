"""Project-native typed exceptions for lifecycle business failures."""

from __future__ import annotations

from typing import Final

USER_NOT_FOUND: Final[str] = "USER_NOT_FOUND"
ROLE_NOT_ALLOWED: Final[str] = "ROLE_NOT_ALLOWED"
PENDING_LIMIT_REACHED: Final[str] = "PENDING_LIMIT_REACHED"
DUPLICATE_PENDING_APPLICATION: Final[str] = "DUPLICATE_PENDING_APPLICATION"
PROPERTY_NOT_FOUND: Final[str] = "PROPERTY_NOT_FOUND"
PROPERTY_UNAVAILABLE: Final[str] = "PROPERTY_UNAVAILABLE"
DOCUMENTS_NOT_APPROVED: Final[str] = "DOCUMENTS_NOT_APPROVED"
COLLABORATOR_UNAVAILABLE: Final[str] = "COLLABORATOR_UNAVAILABLE"
INVALID_STATUS: Final[str] = "INVALID_STATUS"
INVALID_TRANSITION: Final[str] = "INVALID_TRANSITION"
APPLICATION_NOT_FOUND: Final[str] = "APPLICATION_NOT_FOUND"
APPLICATION_NOT_ACCEPTED: Final[str] = "APPLICATION_NOT_ACCEPTED"
ACTIVE_REGISTRY_EXISTS: Final[str] = "ACTIVE_REGISTRY_EXISTS"
INVALID_DATE_RANGE: Final[str] = "INVALID_DATE_RANGE"
INVALID_AMOUNT: Final[str] = "INVALID_AMOUNT"
REGISTRY_NOT_FOUND: Final[str] = "REGISTRY_NOT_FOUND"
REGISTRY_ALREADY_INACTIVE: Final[str] = "REGISTRY_ALREADY_INACTIVE"


class LifecycleError(Exception):
    """Base exception for lifecycle failures surfaced to callers.

    Attributes:
        error_code: Deterministic machine-readable failure code.
    """

    def __init__(self, message: str, error_code: str):
        super().__init__(message)
        self.error_code = error_code


class LifecycleNotFoundError(LifecycleError, LookupError):
    """Referenced application or registry does not exist locally."""


class LifecycleValidationError(LifecycleError, ValueError):
    """Business precondition or referenced-entity validation failed."""
