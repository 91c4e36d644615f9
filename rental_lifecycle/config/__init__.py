"""Configuration package for runtime settings, logging and startup validation."""

from .logging import config_configure_logging
from .settings import (
	AppSettings,
	DatabaseUrlSettings,
	SettingsLoadError,
	config_load_database_url,
	config_load_settings,
	config_parse_allowed_roles,
)

__all__ = [
	"AppSettings",
	"DatabaseUrlSettings",
	"SettingsLoadError",
	"config_configure_logging",
	"config_load_database_url",
	"config_load_settings",
	"config_parse_allowed_roles",
]
