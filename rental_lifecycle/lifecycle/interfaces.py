"""Typed interfaces for lifecycle-layer services consumed by the API."""

from datetime import date
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from rental_lifecycle.domain import ApplicationView, RegistryView


class ApplicationLifecyclePort(Protocol):
    """Port definition for rental application workflows."""

    def lifecycle_application_create(self, user_id: int, property_id: int) -> ApplicationView:
        """Validate and persist a new PENDING application.

        Args:
            user_id: External user identifier.
            property_id: External property identifier.

        Returns:
            ApplicationView: Created application with best-effort display data.

        Raises:
            LifecycleValidationError: Raised when any creation precondition fails.
        """

    def lifecycle_application_transition_status(self, application_id: UUID, new_status: str) -> ApplicationView:
        """Move an application along the status transition table.

        Raises:
            LifecycleNotFoundError: Raised when the application does not exist.
            LifecycleValidationError: Raised for unknown statuses or disallowed transitions.
        """

    def lifecycle_application_get_by_id(self, application_id: UUID, with_details: bool = True) -> ApplicationView:
        """Return one application view or raise LifecycleNotFoundError."""

    def lifecycle_application_list_by_user(self, user_id: int, with_details: bool = False) -> list[ApplicationView]:
        """Return applications for one user."""

    def lifecycle_application_list_by_property(
        self,
        property_id: int,
        with_details: bool = False,
    ) -> list[ApplicationView]:
        """Return applications for one property."""

    def lifecycle_application_list_all(self, with_details: bool, limit: int, offset: int) -> list[ApplicationView]:
        """Return one page of applications, newest first."""


class RegistryLifecyclePort(Protocol):
    """Port definition for tenancy registry workflows."""

    def lifecycle_registry_create(
        self,
        application_id: UUID,
        start_date: date,
        end_date: date | None,
        monthly_amount: Decimal,
    ) -> RegistryView:
        """Create the single active registry for an accepted application.

        Raises:
            LifecycleNotFoundError: Raised when the application does not exist.
            LifecycleValidationError: Raised when status, uniqueness, date or amount rules fail.
        """

    def lifecycle_registry_finalize(self, registry_id: UUID) -> RegistryView:
        """Deactivate an active registry.

        Raises:
            LifecycleNotFoundError: Raised when the registry does not exist.
            LifecycleValidationError: Raised when the registry is already inactive.
        """

    def lifecycle_registry_get_by_id(self, registry_id: UUID, with_details: bool = True) -> RegistryView:
        """Return one registry view or raise LifecycleNotFoundError."""

    def lifecycle_registry_list_by_application(
        self,
        application_id: UUID,
        with_details: bool = False,
    ) -> list[RegistryView]:
        """Return active and historical registries for one application."""

    def lifecycle_registry_list_all(self, with_details: bool, limit: int, offset: int) -> list[RegistryView]:
        """Return one page of registries, newest first."""
