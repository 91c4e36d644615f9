"""Database service for rental application persistence and status compare-and-set."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Final
from uuid import UUID

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from rental_lifecycle.domain import ApplicationRecord

from .interfaces import ApplicationRepositoryPort

_APPLICATION_COLUMNS: Final[str] = "application_id, user_id, property_id, status, created_at_utc"


class SQLAlchemyApplicationRepository(ApplicationRepositoryPort):
    """SQLAlchemy-backed rental application repository.

    Status changes are applied with a conditional update so that two operators
    deciding the same application cannot both win.
    """

    def __init__(self, engine: Engine):
        """Initialize application persistence service.

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

    def db_application_create(
        self,
        user_id: int,
        property_id: int,
        status: str,
        created_at_utc: datetime,
    ) -> ApplicationRecord:
        """Insert one application row and return it with its generated id.

        Args:
            user_id: External user identifier.
            property_id: External property identifier.
            status: Initial status.
            created_at_utc: Creation timestamp in UTC.

        Returns:
            ApplicationRecord: Persisted application.

        Raises:
            ValueError: Raised when status is blank.
            RuntimeError: Raised when persistence fails.
        """

        normalized_status = status.strip()
        if not normalized_status:
            raise ValueError("status must not be blank")

        try:
            with self._engine.begin() as connection:
                row = connection.execute(
                    text(
                        "INSERT INTO rental_application (user_id, property_id, status, created_at_utc) "
                        "VALUES (:user_id, :property_id, :status, :created_at_utc) "
                        f"RETURNING {_APPLICATION_COLUMNS}"
                    ),
                    {
                        "user_id": user_id,
                        "property_id": property_id,
                        "status": normalized_status,
                        "created_at_utc": created_at_utc,
                    },
                ).mappings().one()
                return self._map_application_record(row)
        except SQLAlchemyError as error:
            raise RuntimeError("failed to create rental application") from error

    def db_application_get_by_id(self, application_id: UUID) -> ApplicationRecord | None:
        """Fetch one application by id.

        Args:
            application_id: Application identifier.

        Returns:
            ApplicationRecord | None: Matching row or None.

        Raises:
            RuntimeError: Raised when database read fails.
        """

        try:
            with self._engine.connect() as connection:
                row = connection.execute(
                    text(f"SELECT {_APPLICATION_COLUMNS} FROM rental_application WHERE application_id = :application_id"),
                    {"application_id": application_id},
                ).mappings().first()
                if row is None:
                    return None
                return self._map_application_record(row)
        except SQLAlchemyError as error:
            raise RuntimeError("failed to fetch rental application by id") from error

    def db_application_list_by_user(self, user_id: int) -> list[ApplicationRecord]:
        """List applications submitted by one user."""

        return self._db_list_where(
            where_clause="user_id = :user_id",
            parameters={"user_id": user_id},
            failure_message="failed to list rental applications by user",
        )

    def db_application_list_by_property(self, property_id: int) -> list[ApplicationRecord]:
        """List applications targeting one property."""

        return self._db_list_where(
            where_clause="property_id = :property_id",
            parameters={"property_id": property_id},
            failure_message="failed to list rental applications by property",
        )

    def db_application_list(self, limit: int, offset: int) -> list[ApplicationRecord]:
        """List applications with deterministic newest-first ordering.

        Args:
            limit: Maximum number of rows.
            offset: Number of rows to skip.

        Returns:
            list[ApplicationRecord]: Ordered application rows.

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
                        f"SELECT {_APPLICATION_COLUMNS} FROM rental_application "
                        "ORDER BY created_at_utc DESC, application_id DESC "
                        "LIMIT :limit OFFSET :offset"
                    ),
                    {"limit": limit, "offset": offset},
                ).mappings().all()
                return [self._map_application_record(row) for row in rows]
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list rental applications") from error

    def db_application_update_status(
        self,
        application_id: UUID,
        expected_status: str,
        new_status: str,
    ) -> ApplicationRecord | None:
        """Apply a status change only when the row still holds the expected status.

        Args:
            application_id: Application identifier.
            expected_status: Status observed before the transition decision.
            new_status: Target status.

        Returns:
            ApplicationRecord | None: Updated row, or None when no row matched.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        try:
            with self._engine.begin() as connection:
                row = connection.execute(
                    text(
                        "UPDATE rental_application SET status = :new_status "
                        "WHERE application_id = :application_id AND status = :expected_status "
                        f"RETURNING {_APPLICATION_COLUMNS}"
                    ),
                    {
                        "application_id": application_id,
                        "expected_status": expected_status,
                        "new_status": new_status,
                    },
                ).mappings().first()
                if row is None:
                    return None
                return self._map_application_record(row)
        except SQLAlchemyError as error:
            raise RuntimeError("failed to update rental application status") from error

    def _db_list_where(
        self,
        where_clause: str,
        parameters: dict[str, Any],
        failure_message: str,
    ) -> list[ApplicationRecord]:
        try:
            with self._engine.connect() as connection:
                rows = connection.execute(
                    text(
                        f"SELECT {_APPLICATION_COLUMNS} FROM rental_application "
                        f"WHERE {where_clause} "
                        "ORDER BY created_at_utc ASC, application_id ASC"
                    ),
                    parameters,
                ).mappings().all()
                return [self._map_application_record(row) for row in rows]
        except SQLAlchemyError as error:
            raise RuntimeError(failure_message) from error

    def _map_application_record(self, row: Any) -> ApplicationRecord:
        """Map SQLAlchemy row mapping to typed application record.

        Args:
            row: SQLAlchemy mapping row.

        Returns:
            ApplicationRecord: Typed application record.
        """

        return ApplicationRecord(
            application_id=row["application_id"],
            user_id=int(row["user_id"]),
            property_id=int(row["property_id"]),
            status=row["status"],
            created_at_utc=row["created_at_utc"],
        )
