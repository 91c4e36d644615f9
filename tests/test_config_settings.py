"""Tests for runtime settings validation and logging configuration."""

from __future__ import annotations

import pytest
import structlog
from pydantic import ValidationError

from rental_lifecycle.config import (
    AppSettings,
    SettingsLoadError,
    config_configure_logging,
    config_load_database_url,
    config_load_settings,
    config_parse_allowed_roles,
)


def test_settings_normalize_backend_urls_and_log_options() -> None:
    settings = AppSettings(
        storage_backend=" Memory ",
        identity_service_url="http://identity.test/",
        log_level="debug",
        log_format="JSON",
    )

    assert settings.storage_backend == "memory"
    assert settings.identity_service_url == "http://identity.test"
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.application_max_pending_per_user == 3


@pytest.mark.parametrize(
    "overrides",
    [
        {"storage_backend": "sqlite"},
        {"property_service_url": "property.test"},
        {"log_format": "xml"},
        {"log_level": "verbose"},
        {"api_default_limit": 100, "api_max_limit": 10},
        {"collaborator_timeout_seconds": 0},
    ],
)
def test_settings_reject_invalid_values(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        AppSettings(**overrides)


@pytest.mark.parametrize(
    ("raw_roles", "expected"),
    [
        ("", None),
        (" , ", None),
        ("inquilino", frozenset({"INQUILINO"})),
        ("INQUILINO, propietario ,", frozenset({"INQUILINO", "PROPIETARIO"})),
    ],
)
def test_config_parse_allowed_roles(raw_roles: str, expected: frozenset[str] | None) -> None:
    assert config_parse_allowed_roles(raw_roles) == expected


def test_settings_expose_allowed_roles() -> None:
    assert AppSettings(application_allowed_roles="inquilino").config_allowed_roles() == frozenset({"INQUILINO"})
    assert AppSettings().config_allowed_roles() is None


def test_config_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "cassandra")

    with pytest.raises(SettingsLoadError):
        config_load_settings()


def test_config_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("APPLICATION_MAX_PENDING_PER_USER", "5")
    monkeypatch.setenv("DOCUMENT_CHECK_ENABLED", "true")

    settings = config_load_settings()

    assert settings.storage_backend == "memory"
    assert settings.application_max_pending_per_user == 5
    assert settings.document_check_enabled is True


def test_config_load_database_url_rejects_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "   ")

    with pytest.raises(SettingsLoadError):
        config_load_database_url()


def test_config_configure_logging_installs_structlog_processors() -> None:
    config_configure_logging(log_level="INFO", log_format="json")

    processors = structlog.get_config()["processors"]

    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    structlog.reset_defaults()
