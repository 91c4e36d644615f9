"""Database layer package for persistence and connectivity services."""

from .application_store import SQLAlchemyApplicationRepository
from .health import InMemoryDatabaseHealthService, SQLAlchemyDatabaseHealthService
from .interfaces import (
	ApplicationRepositoryPort,
	DatabaseHealthPort,
	RegistryAlreadyActiveError,
	RegistryRepositoryPort,
)
from .memory_store import InMemoryApplicationRepository, InMemoryRegistryRepository
from .registry_store import ACTIVE_REGISTRY_UNIQUE_INDEX, SQLAlchemyRegistryRepository
from .session import db_create_engine

__all__ = [
	"ACTIVE_REGISTRY_UNIQUE_INDEX",
	"ApplicationRepositoryPort",
	"DatabaseHealthPort",
	"InMemoryApplicationRepository",
	"InMemoryDatabaseHealthService",
	"InMemoryRegistryRepository",
	"RegistryAlreadyActiveError",
	"RegistryRepositoryPort",
	"SQLAlchemyApplicationRepository",
	"SQLAlchemyDatabaseHealthService",
	"SQLAlchemyRegistryRepository",
	"db_create_engine",
]
