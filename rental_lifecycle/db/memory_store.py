"""Process-local stores used for the memory storage backend and tests."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID, uuid4

from rental_lifecycle.domain import ApplicationRecord, RegistryRecord

from .interfaces import ApplicationRepositoryPort, RegistryAlreadyActiveError, RegistryRepositoryPort


class InMemoryApplicationRepository(ApplicationRepositoryPort):
    """Thread-safe dictionary-backed application repository."""

    def __init__(self):
        self._lock = threading.Lock()
        self._records: dict[UUID, ApplicationRecord] = {}

    def db_application_create(
        self,
        user_id: int,
        property_id: int,
        status: str,
        created_at_utc: datetime,
    ) -> ApplicationRecord:
        normalized_status = status.strip()
        if not normalized_status:
            raise ValueError("status must not be blank")

        record = ApplicationRecord(
            application_id=uuid4(),
            user_id=user_id,
            property_id=property_id,
            status=normalized_status,
            created_at_utc=created_at_utc,
        )
        with self._lock:
            self._records[record.application_id] = record
        return record

    def db_application_get_by_id(self, application_id: UUID) -> ApplicationRecord | None:
        with self._lock:
            return self._records.get(application_id)

    def db_application_list_by_user(self, user_id: int) -> list[ApplicationRecord]:
        with self._lock:
            matches = [record for record in self._records.values() if record.user_id == user_id]
        return sorted(matches, key=_oldest_first_key)

    def db_application_list_by_property(self, property_id: int) -> list[ApplicationRecord]:
        with self._lock:
            matches = [record for record in self._records.values() if record.property_id == property_id]
        return sorted(matches, key=_oldest_first_key)

    def db_application_list(self, limit: int, offset: int) -> list[ApplicationRecord]:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        if offset < 0:
            raise ValueError("offset must be >= 0")

        with self._lock:
            records = list(self._records.values())
        ordered = sorted(records, key=_oldest_first_key, reverse=True)
        return ordered[offset : offset + limit]

    def db_application_update_status(
        self,
        application_id: UUID,
        expected_status: str,
        new_status: str,
    ) -> ApplicationRecord | None:
        """Swap the status only when the stored record still holds `expected_status`."""

        with self._lock:
            current = self._records.get(application_id)
            if current is None or current.status != expected_status:
                return None
            updated = replace(current, status=new_status)
            self._records[application_id] = updated
            return updated


class InMemoryRegistryRepository(RegistryRepositoryPort):
    """Dictionary-backed registry repository with per-application creation locks.

    The guard lock protects the record map and the lock table; the
    per-application lock spans the active check and the insert. Lock slots are
    dropped once no creator holds or waits on them.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._application_locks: dict[UUID, _ApplicationLockSlot] = {}
        self._records: dict[UUID, RegistryRecord] = {}

    def db_registry_create_active(
        self,
        application_id: UUID,
        start_date: date,
        end_date: date | None,
        monthly_amount: Decimal,
        created_at_utc: datetime,
    ) -> RegistryRecord:
        with self._application_lock(application_id):
            if any(record.active for record in self.db_registry_list_by_application(application_id)):
                raise RegistryAlreadyActiveError("an active registry already exists for this application")

            record = RegistryRecord(
                registry_id=uuid4(),
                application_id=application_id,
                start_date=start_date,
                end_date=end_date,
                monthly_amount=monthly_amount,
                active=True,
                created_at_utc=created_at_utc,
            )
            with self._guard:
                self._records[record.registry_id] = record
            return record

    def db_registry_get_by_id(self, registry_id: UUID) -> RegistryRecord | None:
        with self._guard:
            return self._records.get(registry_id)

    def db_registry_list_by_application(self, application_id: UUID) -> list[RegistryRecord]:
        with self._guard:
            matches = [record for record in self._records.values() if record.application_id == application_id]
        return sorted(matches, key=_oldest_first_key)

    def db_registry_list(self, limit: int, offset: int) -> list[RegistryRecord]:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        if offset < 0:
            raise ValueError("offset must be >= 0")

        with self._guard:
            records = list(self._records.values())
        ordered = sorted(records, key=_oldest_first_key, reverse=True)
        return ordered[offset : offset + limit]

    def db_registry_finalize(self, registry_id: UUID, end_date: date) -> RegistryRecord | None:
        with self._guard:
            current = self._records.get(registry_id)
            if current is None or not current.active:
                return None
            updated = replace(
                current,
                active=False,
                end_date=current.end_date if current.end_date is not None else end_date,
            )
            self._records[registry_id] = updated
            return updated

    @contextmanager
    def _application_lock(self, application_id: UUID) -> Iterator[None]:
        with self._guard:
            slot = self._application_locks.get(application_id)
            if slot is None:
                slot = _ApplicationLockSlot()
                self._application_locks[application_id] = slot
            slot.holders += 1
        try:
            with slot.lock:
                yield
        finally:
            with self._guard:
                slot.holders -= 1
                if slot.holders == 0:
                    del self._application_locks[application_id]


@dataclass
class _ApplicationLockSlot:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


def _oldest_first_key(record: ApplicationRecord | RegistryRecord) -> tuple[datetime, str]:
    if isinstance(record, RegistryRecord):
        return record.created_at_utc, str(record.registry_id)
    return record.created_at_utc, str(record.application_id)
