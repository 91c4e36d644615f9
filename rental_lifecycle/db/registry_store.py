"""Database service for tenancy registry persistence and single-active-registry enforcement."""

from __future__ import annotations

import hashlib
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Final
from uuid import UUID

from sqlalchemy import Engine, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from rental_lifecycle.domain import RegistryRecord

from .interfaces import RegistryAlreadyActiveError, RegistryRepositoryPort

_REGISTRY_COLUMNS: Final[str] = (
    "registry_id, application_id, start_date, end_date, monthly_amount, active, created_at_utc"
)
ACTIVE_REGISTRY_UNIQUE_INDEX: Final[str] = "uq_rental_registry_active_application"


class SQLAlchemyRegistryRepository(RegistryRepositoryPort):
    """SQLAlchemy-backed tenancy registry repository.

    Active-registry creation is serialized per application with a transaction
    scoped advisory lock; the partial unique index on `(application_id) WHERE
    active` rejects any insert that bypasses the lock.
    """

    def __init__(self, engine: Engine):
        """Initialize registry persistence service.

        Args:
            engine: SQLAlchemy engine used for all persistence operations.

        Returns:
            None: This initializer does not return a value.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_registry_create_active(
        self,
        application_id: UUID,
        start_date: date,
        end_date: date | None,
        monthly_amount: Decimal,
        created_at_utc: datetime,
    ) -> RegistryRecord:
        """Create an active registry under the per-application lock.

        Args:
            application_id: Source application identifier.
            start_date: Tenancy start date.
            end_date: Optional tenancy end date.
            monthly_amount: Monthly rent amount.
            created_at_utc: Creation timestamp in UTC.

        Returns:
            RegistryRecord: Newly created active registry.

        Raises:
            RegistryAlreadyActiveError: Raised when an active registry exists for the application.
            RuntimeError: Raised when persistence fails.
        """

        advisory_key_1, advisory_key_2 = self._build_advisory_lock_keys(application_id)

        try:
            with self._engine.begin() as connection:
                connection.execute(
                    text("SELECT pg_advisory_xact_lock(:key_1, :key_2)"),
                    {"key_1": advisory_key_1, "key_2": advisory_key_2},
                )

                active_row = connection.execute(
                    text(
                        "SELECT registry_id FROM rental_registry "
                        "WHERE application_id = :application_id AND active "
                        "LIMIT 1"
                    ),
                    {"application_id": application_id},
                ).first()
                if active_row is not None:
                    raise RegistryAlreadyActiveError("an active registry already exists for this application")

                created_row = connection.execute(
                    text(
                        "INSERT INTO rental_registry ("
                        "application_id, start_date, end_date, monthly_amount, active, created_at_utc"
                        ") VALUES ("
                        ":application_id, :start_date, :end_date, :monthly_amount, true, :created_at_utc"
                        ") "
                        f"RETURNING {_REGISTRY_COLUMNS}"
                    ),
                    {
                        "application_id": application_id,
                        "start_date": start_date,
                        "end_date": end_date,
                        "monthly_amount": monthly_amount,
                        "created_at_utc": created_at_utc,
                    },
                ).mappings().one()
                return self._map_registry_record(created_row)
        except IntegrityError as error:
            if ACTIVE_REGISTRY_UNIQUE_INDEX in str(error.orig):
                raise RegistryAlreadyActiveError(
                    "an active registry already exists for this application"
                ) from error
            raise RuntimeError("failed to create rental registry") from error
        except SQLAlchemyError as error:
            raise RuntimeError("failed to create rental registry") from error

    def db_registry_get_by_id(self, registry_id: UUID) -> RegistryRecord | None:
        """Fetch one registry by id.

        Args:
            registry_id: Registry identifier.

        Returns:
            RegistryRecord | None: Matching row or None.

        Raises:
            RuntimeError: Raised when database read fails.
        """

        try:
            with self._engine.connect() as connection:
                row = connection.execute(
                    text(f"SELECT {_REGISTRY_COLUMNS} FROM rental_registry WHERE registry_id = :registry_id"),
                    {"registry_id": registry_id},
                ).mappings().first()
                if row is None:
                    return None
                return self._map_registry_record(row)
        except SQLAlchemyError as error:
            raise RuntimeError("failed to fetch rental registry by id") from error

    def db_registry_list_by_application(self, application_id: UUID) -> list[RegistryRecord]:
        """List registries for one application, oldest first."""

        try:
            with self._engine.connect() as connection:
                rows = connection.execute(
                    text(
                        f"SELECT {_REGISTRY_COLUMNS} FROM rental_registry "
                        "WHERE application_id = :application_id "
                        "ORDER BY created_at_utc ASC, registry_id ASC"
                    ),
                    {"application_id": application_id},
                ).mappings().all()
                return [self._map_registry_record(row) for row in rows]
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list rental registries by application") from error

    def db_registry_list(self, limit: int, offset: int) -> list[RegistryRecord]:
        """List registries with deterministic newest-first ordering.

        Args:
            limit: Maximum number of rows.
            offset: Number of rows to skip.

        Returns:
            list[RegistryRecord]: Ordered registry rows.

        Raises:
            ValueError: Raised when limit or offset are invalid.
            RuntimeError: Raised when database read fails.
        """

        if limit < 1:
            raise ValueError("limit must be >= 1")
        if offset < 0:
            raise ValueError("offset must be >= 0")

        try:
            with self._engine.connect() as connection:
                rows = connection.execute(
                    text(
                        f"SELECT {_REGISTRY_COLUMNS} FROM rental_registry "
                        "ORDER BY created_at_utc DESC, registry_id DESC "
                        "LIMIT :limit OFFSET :offset"
                    ),
                    {"limit": limit, "offset": offset},
                ).mappings().all()
                return [self._map_registry_record(row) for row in rows]
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list rental registries") from error

    def db_registry_finalize(self, registry_id: UUID, end_date: date) -> RegistryRecord | None:
        """Deactivate one registry if it is still active.

        Args:
            registry_id: Registry identifier.
            end_date: End date stamped when the row has none.

        Returns:
            RegistryRecord | None: Updated row, or None when absent or already inactive.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        try:
            with self._engine.begin() as connection:
                row = connection.execute(
                    text(
                        "UPDATE rental_registry SET "
                        "active = false, "
                        "end_date = COALESCE(end_date, :end_date) "
                        "WHERE registry_id = :registry_id AND active "
                        f"RETURNING {_REGISTRY_COLUMNS}"
                    ),
                    {"registry_id": registry_id, "end_date": end_date},
                ).mappings().first()
                if row is None:
                    return None
                return self._map_registry_record(row)
        except SQLAlchemyError as error:
            raise RuntimeError("failed to finalize rental registry") from error

    def _map_registry_record(self, row: Any) -> RegistryRecord:
        """Map SQLAlchemy row mapping to typed registry record.

        Args:
            row: SQLAlchemy mapping row.

        Returns:
            RegistryRecord: Typed registry record.
        """

        return RegistryRecord(
            registry_id=row["registry_id"],
            application_id=row["application_id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            monthly_amount=Decimal(row["monthly_amount"]),
            active=bool(row["active"]),
            created_at_utc=row["created_at_utc"],
        )

    def _build_advisory_lock_keys(self, application_id: UUID) -> tuple[int, int]:
        """Create deterministic advisory lock keys for the application-scoped registry lock.

        Args:
            application_id: Application identifier.

        Returns:
            tuple[int, int]: Two signed int32 lock keys for PostgreSQL advisory lock.
        """

        digest = hashlib.sha256(f"rental_registry:{application_id}".encode("utf-8")).digest()
        key_1 = int.from_bytes(digest[0:4], byteorder="big", signed=True)
        key_2 = int.from_bytes(digest[4:8], byteorder="big", signed=True)
        return key_1, key_2
