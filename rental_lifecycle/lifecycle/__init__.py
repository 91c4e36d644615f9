"""Lifecycle layer package for application and registry workflows."""

from .application_manager import ApplicationLifecycleManager, ApplicationPolicy, lifecycle_utc_now
from .enrichment import (
	ISSUE_PROPERTY_NOT_FOUND,
	ISSUE_PROPERTY_UNAVAILABLE,
	ISSUE_USER_NOT_FOUND,
	ISSUE_USER_UNAVAILABLE,
	ApplicationViewEnricher,
)
from .interfaces import ApplicationLifecyclePort, RegistryLifecyclePort
from .registry_manager import ISSUE_APPLICATION_NOT_FOUND, ISSUE_APPLICATION_UNAVAILABLE, RegistryLifecycleManager

__all__ = [
	"ISSUE_APPLICATION_NOT_FOUND",
	"ISSUE_APPLICATION_UNAVAILABLE",
	"ISSUE_PROPERTY_NOT_FOUND",
	"ISSUE_PROPERTY_UNAVAILABLE",
	"ISSUE_USER_NOT_FOUND",
	"ISSUE_USER_UNAVAILABLE",
	"ApplicationLifecycleManager",
	"ApplicationLifecyclePort",
	"ApplicationPolicy",
	"ApplicationViewEnricher",
	"RegistryLifecycleManager",
	"RegistryLifecyclePort",
	"lifecycle_utc_now",
]
