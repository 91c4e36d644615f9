"""Tests for the in-memory application and registry repositories."""
# pylint: disable=protected-access

from __future__ import annotations

import threading
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from rental_lifecycle.db import (
    InMemoryApplicationRepository,
    InMemoryDatabaseHealthService,
    InMemoryRegistryRepository,
    RegistryAlreadyActiveError,
)

_BASE_TIME = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def test_memory_application_repository_filters_and_orders_records() -> None:
    repository = InMemoryApplicationRepository()
    first = repository.db_application_create(1, 10, "PENDING", _BASE_TIME)
    second = repository.db_application_create(1, 11, "PENDING", _BASE_TIME + timedelta(minutes=1))
    other_user = repository.db_application_create(2, 10, "PENDING", _BASE_TIME + timedelta(minutes=2))

    assert repository.db_application_get_by_id(first.application_id) == first
    assert repository.db_application_get_by_id(uuid4()) is None
    assert repository.db_application_list_by_user(1) == [first, second]
    assert repository.db_application_list_by_property(10) == [first, other_user]
    assert repository.db_application_list(limit=2, offset=0) == [other_user, second]
    assert repository.db_application_list(limit=2, offset=2) == [first]


def test_memory_application_repository_rejects_invalid_pagination() -> None:
    repository = InMemoryApplicationRepository()

    with pytest.raises(ValueError):
        repository.db_application_list(limit=0, offset=0)
    with pytest.raises(ValueError):
        repository.db_application_list(limit=1, offset=-1)


def test_memory_application_status_update_is_compare_and_set() -> None:
    repository = InMemoryApplicationRepository()
    record = repository.db_application_create(1, 10, "PENDING", _BASE_TIME)

    updated = repository.db_application_update_status(record.application_id, "PENDING", "ACCEPTED")
    stale = repository.db_application_update_status(record.application_id, "PENDING", "REJECTED")

    assert updated is not None
    assert updated.status == "ACCEPTED"
    assert stale is None
    assert repository.db_application_get_by_id(record.application_id).status == "ACCEPTED"
    assert repository.db_application_update_status(uuid4(), "PENDING", "ACCEPTED") is None


def test_memory_registry_repository_allows_one_active_registry_per_application() -> None:
    repository = InMemoryRegistryRepository()
    application_id = uuid4()

    created = repository.db_registry_create_active(application_id, date(2026, 11, 1), None, Decimal("500000"), _BASE_TIME)

    assert created.active is True
    with pytest.raises(RegistryAlreadyActiveError):
        repository.db_registry_create_active(application_id, date(2026, 12, 1), None, Decimal("500000"), _BASE_TIME)

    finalized = repository.db_registry_finalize(created.registry_id, end_date=date(2026, 12, 31))
    assert finalized is not None
    assert finalized.active is False
    assert finalized.end_date == date(2026, 12, 31)

    replacement = repository.db_registry_create_active(
        application_id,
        date(2027, 1, 1),
        None,
        Decimal("550000"),
        _BASE_TIME + timedelta(days=1),
    )
    assert repository.db_registry_list_by_application(application_id) == [finalized, replacement]


def test_memory_registry_releases_creation_locks_after_each_create() -> None:
    repository = InMemoryRegistryRepository()
    application_ids = [uuid4() for _ in range(5)]

    for application_id in application_ids:
        repository.db_registry_create_active(application_id, date(2026, 11, 1), None, Decimal("500000"), _BASE_TIME)
    with pytest.raises(RegistryAlreadyActiveError):
        repository.db_registry_create_active(application_ids[0], date(2026, 12, 1), None, Decimal("500000"), _BASE_TIME)

    assert repository._application_locks == {}

def test_memory_registry_finalize_keeps_existing_end_date_and_rejects_inactive() -> None:
    repository = InMemoryRegistryRepository()
    created = repository.db_registry_create_active(
        uuid4(),
        date(2026, 11, 1),
        date(2027, 10, 31),
        Decimal("500000"),
        _BASE_TIME,
    )

    finalized = repository.db_registry_finalize(created.registry_id, end_date=date(2026, 12, 15))

    assert finalized is not None
    assert finalized.end_date == date(2027, 10, 31)
    assert repository.db_registry_finalize(created.registry_id, end_date=date(2026, 12, 16)) is None
    assert repository.db_registry_finalize(uuid4(), end_date=date(2026, 12, 16)) is None


def test_memory_registry_concurrent_creates_leave_exactly_one_active() -> None:
    repository = InMemoryRegistryRepository()
    application_id = uuid4()
    worker_count = 16
    start_barrier = threading.Barrier(worker_count)
    outcomes: list[str] = []
    outcomes_lock = threading.Lock()

    def _worker() -> None:
        start_barrier.wait()
        try:
            repository.db_registry_create_active(application_id, date(2026, 11, 1), None, Decimal("500000"), _BASE_TIME)
            outcome = "created"
        except RegistryAlreadyActiveError:
            outcome = "rejected"
        with outcomes_lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=_worker) for _ in range(worker_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count("created") == 1
    assert outcomes.count("rejected") == worker_count - 1
    active = [record for record in repository.db_registry_list_by_application(application_id) if record.active]
    assert len(active) == 1
    assert repository._application_locks == {}


def test_memory_health_service_reports_ok() -> None:
    health_service = InMemoryDatabaseHealthService()

    assert health_service.db_connection_label() == "memory://"
    assert health_service.db_check_health().status == "ok"
