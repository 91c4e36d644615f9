"""Typed interfaces for database-layer services.

All SQL and ORM access must remain in the db package and its submodules.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from rental_lifecycle.domain import ApplicationRecord, HealthStatus, RegistryRecord


class DatabaseHealthPort(Protocol):
    """Port definition for database connectivity verification."""

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics.

        Raises:
            RuntimeError: Raised when connection metadata is unavailable.
        """

    def db_check_health(self) -> HealthStatus:
        """Check database connectivity and return deterministic health payload.

        Returns:
            HealthStatus: Database health status payload.

        Raises:
            ConnectionError: Raised when database cannot be reached.
        """


class RegistryAlreadyActiveError(RuntimeError):
    """Raised when a registry insert is rejected because one is already active for the application."""


class ApplicationRepositoryPort(Protocol):
    """Port definition for rental application persistence and reads."""

    def db_application_create(
        self,
        user_id: int,
        property_id: int,
        status: str,
        created_at_utc: datetime,
    ) -> ApplicationRecord:
        """Persist a new application row.

        Args:
            user_id: External user identifier.
            property_id: External property identifier.
            status: Initial application status.
            created_at_utc: Creation timestamp in UTC.

        Returns:
            ApplicationRecord: Newly created application with assigned id.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

    def db_application_get_by_id(self, application_id: UUID) -> ApplicationRecord | None:
        """Fetch one application by primary key.

        Args:
            application_id: Application identifier.

        Returns:
            ApplicationRecord | None: Matching row, or None when absent.

        Raises:
            RuntimeError: Raised when database read fails.
        """

    def db_application_list_by_user(self, user_id: int) -> list[ApplicationRecord]:
        """List applications for one user ordered by creation time."""

    def db_application_list_by_property(self, property_id: int) -> list[ApplicationRecord]:
        """List applications for one property ordered by creation time."""

    def db_application_list(self, limit: int, offset: int) -> list[ApplicationRecord]:
        """List applications ordered by latest creation timestamp and id.

        Args:
            limit: Max rows to return.
            offset: Rows to skip.

        Returns:
            list[ApplicationRecord]: Deterministically ordered rows.

        Raises:
            ValueError: Raised when pagination arguments are invalid.
        """

    def db_application_update_status(
        self,
        application_id: UUID,
        expected_status: str,
        new_status: str,
    ) -> ApplicationRecord | None:
        """Compare-and-set the application status.

        Args:
            application_id: Application identifier.
            expected_status: Status the row must still hold for the write to apply.
            new_status: Status to write.

        Returns:
            ApplicationRecord | None: Updated row, or None when the row is absent or its status changed.

        Raises:
            RuntimeError: Raised when persistence fails.
        """


class RegistryRepositoryPort(Protocol):
    """Port definition for tenancy registry persistence and reads."""

    def db_registry_create_active(
        self,
        application_id: UUID,
        start_date: date,
        end_date: date | None,
        monthly_amount: Decimal,
        created_at_utc: datetime,
    ) -> RegistryRecord:
        """Insert an active registry while enforcing one active registry per application.

        Args:
            application_id: Source application identifier.
            start_date: Tenancy start date.
            end_date: Optional tenancy end date.
            monthly_amount: Monthly rent amount.
            created_at_utc: Creation timestamp in UTC.

        Returns:
            RegistryRecord: Newly created active registry.

        Raises:
            RegistryAlreadyActiveError: Raised when an active registry already exists.
            RuntimeError: Raised when persistence fails.
        """

    def db_registry_get_by_id(self, registry_id: UUID) -> RegistryRecord | None:
        """Fetch one registry by primary key.

        Args:
            registry_id: Registry identifier.

        Returns:
            RegistryRecord | None: Matching row, or None when absent.

        Raises:
            RuntimeError: Raised when database read fails.
        """

    def db_registry_list_by_application(self, application_id: UUID) -> list[RegistryRecord]:
        """List active and historical registries for one application."""

    def db_registry_list(self, limit: int, offset: int) -> list[RegistryRecord]:
        """List registries ordered by latest creation timestamp and id.

        Args:
            limit: Max rows to return.
            offset: Rows to skip.

        Returns:
            list[RegistryRecord]: Deterministically ordered rows.

        Raises:
            ValueError: Raised when pagination arguments are invalid.
        """

    def db_registry_finalize(self, registry_id: UUID, end_date: date) -> RegistryRecord | None:
        """Deactivate an active registry and stamp its end date when unset.

        Args:
            registry_id: Registry identifier.
            end_date: End date applied when the row has none.

        Returns:
            RegistryRecord | None: Updated row, or None when absent or already inactive.

        Raises:
            RuntimeError: Raised when persistence fails.
        """
